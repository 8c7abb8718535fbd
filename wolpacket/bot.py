from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Update
from telegram.error import BadRequest
from telegram.ext import Application, CallbackQueryHandler, CommandHandler, ContextTypes

from .config import Host, Settings, load_settings
from .errors import MagicPacketError
from .logs import setup_logging
from .packet import build

logger = logging.getLogger("wolpacket.bot")


def restrict_access(allowed_ids: List[int]):
    def decorator(func):
        async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE):
            uid = update.effective_user.id if update.effective_user else None
            if uid not in allowed_ids:
                logger.warning("Unauthorized access attempt from %s", uid)
                if update.effective_message:
                    await update.effective_message.reply_text("Unauthorized")
                return
            return await func(update, context)
        return wrapper
    return decorator


def build_keyboard(hosts: List[Host]) -> InlineKeyboardMarkup:
    rows = [[InlineKeyboardButton(f"{h.name} • Wake", callback_data=f"wake:{h.name}")] for h in hosts]
    return InlineKeyboardMarkup(rows)


def find_host(hosts: List[Host], name: str) -> Optional[Host]:
    return next((h for h in hosts if h.name == name), None)


async def wake_host(host: Host) -> str:
    packet = build(host.mac)
    try:
        # Blocking socket I/O goes to a worker thread.
        await asyncio.to_thread(packet.send, host.broadcast_ip, host.port)
    except MagicPacketError as e:
        logger.exception("WoL failed for %s", host.name)
        return f"Failed to send WoL to {host.name}: {e}"
    logger.info("Sent WoL to %s (%s) via %s:%d", host.name, host.mac, host.broadcast_ip, host.port)
    return f"Wake signal sent to {host.name}"


async def handle_start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    settings: Settings = context.bot_data["settings"]
    await update.message.reply_text("Select a host:", reply_markup=build_keyboard(settings.hosts))


async def handle_wake(update: Update, context: ContextTypes.DEFAULT_TYPE):
    settings: Settings = context.bot_data["settings"]
    if not context.args:
        await update.message.reply_text("Usage: /wake <host>")
        return
    host = find_host(settings.hosts, context.args[0])
    if not host:
        await update.message.reply_text("Unknown host")
        return
    await update.message.reply_text(await wake_host(host))


async def handle_buttons(update: Update, context: ContextTypes.DEFAULT_TYPE):
    settings: Settings = context.bot_data["settings"]
    query = update.callback_query
    await query.answer()
    action, _, name = (query.data or "").partition(":")
    if action != "wake":
        await safe_edit(query, "Unknown action", build_keyboard(settings.hosts))
        return
    host = find_host(settings.hosts, name)
    if not host:
        await safe_edit(query, "Unknown host", build_keyboard(settings.hosts))
        return
    await safe_edit(query, await wake_host(host), build_keyboard(settings.hosts))


async def safe_edit(query, text: str, markup: InlineKeyboardMarkup):
    try:
        await query.edit_message_text(text, reply_markup=markup)
    except BadRequest as e:
        if "Message is not modified" not in str(e):
            logger.warning("Edit failed: %s", e)


def build_application(settings: Settings) -> Application:
    app = Application.builder().token(settings.tg_token).build()
    app.bot_data["settings"] = settings
    guard = restrict_access(settings.allowed_ids)
    app.add_handler(CommandHandler("start", guard(handle_start)))
    app.add_handler(CommandHandler("wake", guard(handle_wake)))
    app.add_handler(CallbackQueryHandler(guard(handle_buttons)))
    return app


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_file)
    logger.info("Starting WoL bot with %d hosts", len(settings.hosts))
    build_application(settings).run_polling(drop_pending_updates=True)
