import discord
from discord.ext import commands
from dotenv import load_dotenv
from openai import OpenAI

from config.defaults import COMMAND_PREFIX
from controller.persona import default_persona_path
from controller.persona import load_persona
from controller.settings import load_settings
from misc.chunking import send_chunked
from misc.forum_responder import ForumResponder
from misc.runtime_wiring import wire_bot_runtime
from misc.time_gate import now_local

# =========================
# ENV
# =========================
load_dotenv()

SETTINGS = load_settings()
print(f"[CFG] {SETTINGS.describe()}")

# =========================
# PERSONA
# =========================
PERSONA_PATH = SETTINGS.persona_path or default_persona_path()
PERSONA, PERSONA_WARNING = load_persona(PERSONA_PATH)
print(f"[CFG] persona={PERSONA.version} path={PERSONA_PATH}")
if PERSONA_WARNING:
    print(f"[CFG] {PERSONA_WARNING}")

client = OpenAI(api_key=SETTINGS.openai_api_key)

# =========================
# DISCORD BOT
# =========================
intents = discord.Intents.default()
intents.message_content = True

bot = commands.Bot(command_prefix=COMMAND_PREFIX, intents=intents)

responder = ForumResponder(
    bot=bot,
    client=client,
    openai_model=SETTINGS.openai_model,
    persona=PERSONA,
    question_channel_id=SETTINGS.question_channel_id,
    ai_replied_tag_id=SETTINGS.ai_replied_tag_id,
    human_replied_tag_id=SETTINGS.human_replied_tag_id,
    now_func=lambda: now_local(SETTINGS.timezone_name),
)

wire_bot_runtime(
    bot,
    responder=responder,
    settings=SETTINGS,
    send_chunked=send_chunked,
    command_prefix=COMMAND_PREFIX,
)


bot.run(SETTINGS.discord_token)
