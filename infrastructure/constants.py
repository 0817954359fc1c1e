from pathlib import Path

# Repo-root conventional directories/files (overrideable on the command line)
CONFIG_DIR = Path("configs")
BOT_CONFIG_FILE = CONFIG_DIR / "bot.yaml"
ENV_FILE = Path(".env")

DISCORD_API_BASE = "https://discord.com/api/v10"

# Environment variables read at startup
ENV_TOKEN = "DISCORD_TOKEN"
ENV_APPLICATION_ID = "DISCORD_APPLICATION_ID"
ENV_GUILD_ID = "GUILD_ID"
