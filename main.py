"""Entry point for the WoL Telegram bot.
Run: python main.py
"""
from wolpacket.bot import main

if __name__ == "__main__":
    main()
