# config.py
import os

# -------- App identity --------
APP_NAME = "Destinations"

WELCOME_TEXT = "Welcome to your destination manager!"
EMPTY_TEXT = "There is no destination"

# -------- Navigation link defaults --------
# host used for the directions deep link (https://<host>/maps/dir/?api=1&...)
MAPS_HOST = os.getenv("MAPS_HOST", "www.google.com")

# Fixed starting point for every navigation link. Kept as strings so they go
# into the URL exactly as written. Default is Istanbul.
ORIGIN_LAT = os.getenv("ORIGIN_LAT", "41.0052041")
ORIGIN_LON = os.getenv("ORIGIN_LON", "28.8473737")
DEFAULT_ORIGIN = (ORIGIN_LAT, ORIGIN_LON)

# travelmode is passed through untouched; these are just the ones Google knows
DEFAULT_TRAVEL_MODE = os.getenv("TRAVEL_MODE", "driving")
TRAVEL_MODES = ("driving", "walking", "bicycling", "transit")

# -------- TTS defaults --------
# off unless TTS_ENABLED=1
TTS_ENABLED_DEFAULT = os.getenv("TTS_ENABLED", "0") == "1"
TTS_RATE_DEFAULT = int(os.getenv("TTS_RATE")) if os.getenv("TTS_RATE") else None
TTS_VOICE_INDEX_DEFAULT = int(os.getenv("TTS_VOICE_INDEX")) if os.getenv("TTS_VOICE_INDEX") else None

# -------- Diagnostics --------
# NAV_DEBUG=1 prints what the link opener is doing
DEBUG = os.getenv("NAV_DEBUG", "0") == "1"


# -------- User help text --------
HELP_TEXT = f"""
Commands:
/list
    - Show your saved destinations, in the order you added them.

/add
    - Open the add-destination form. You'll be asked for a name,
      a latitude and a longitude. Type /cancel at any prompt to give up.

/add <name> = <lat>,<lon>
    - Add a destination in one line (ex: /add Galata Tower = 41.0256,28.9741).

/remove <id>
    - Remove the destination with that id. Other ids don't change.

/go <id> [travelmode]
    - Open turn-by-turn directions from the origin to that destination.
      travelmode is one of {", ".join(TRAVEL_MODES)} (default {DEFAULT_TRAVEL_MODE}).

/origin
    - Show the origin every route starts from.

/tts on | off
    - Speak notifications out loud (or stop).

/voices
    - List available TTS voices on this machine.

/help
    - Show this help.

/exit
    - Quit.
""".strip()
