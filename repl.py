# repl.py
#
# The destination manager "screen": a slash-command loop.
# - /add, /remove, /list go to the DestinationStore (add via the validator)
# - /go builds the maps link and hands it to the link opener
# All list state lives in the one store passed to run_repl.

import re

from config import (
    APP_NAME,
    DEFAULT_ORIGIN,
    DEFAULT_TRAVEL_MODE,
    EMPTY_TEXT,
    HELP_TEXT,
    TRAVEL_MODES,
    WELCOME_TEXT,
)

from destinations import (
    DestinationStore,
    add_destination,
    list_destinations,
    remove_destination,
)

from validation import ValidationError

from nav import (
    BrowserOpener,
    OpenError,
    go_to_destination,
)

from tts import Notifier

ADD_LINE_RE = re.compile(r"/add\s+(?P<name>.+?)\s*=\s*(?P<coords>.*)$", re.IGNORECASE)

# ---------- helpers ----------

def print_header():
    print("\n----------------------------------------")
    print(f" {APP_NAME}  |  Origin: {DEFAULT_ORIGIN[0]},{DEFAULT_ORIGIN[1]}  |  Mode: {DEFAULT_TRAVEL_MODE}")
    print("----------------------------------------")


def print_destinations(store):
    print("Destinations")
    items = list_destinations(store)
    if not items:
        print(EMPTY_TEXT)
        return
    for d in items:
        print(f"{d.id}. {d.label()}")


def read_field(label, current=""):
    """
    Prompt for one form field.
    Enter keeps `current`. Returns None if the user types /cancel (or EOF).
    The answer is not stripped: the validator decides what's acceptable.
    """
    prompt = f"{label} [{current}]: " if current else f"{label}: "
    try:
        value = input(prompt)
    except (EOFError, KeyboardInterrupt):
        return None
    if value.strip().lower() == "/cancel":
        return None
    if value == "" and current:
        return current
    return value


def run_add_form(store, alert):
    """
    Interactive add-destination form.
    Keeps asking until the form validates or the user cancels; answers carry
    over between attempts so only the bad field needs retyping.
    Returns the new Destination, or None if cancelled.
    """
    print("Add Destination  (/cancel to go back)")
    form = {"name": "", "latitude": "", "longitude": ""}
    while True:
        for key, label in (("name", "Name"), ("latitude", "Latitude"), ("longitude", "Longitude")):
            value = read_field(label, form[key])
            if value is None:
                print("(Cancelled.)")
                return None
            form[key] = value

        try:
            return add_destination(store, form)
        except ValidationError as e:
            alert(e.message)


def parse_add_line(user):
    """
    "/add Home = 41.0, 29.0" -> {"name": "Home", "latitude": "41.0", "longitude": "29.0"}
    Returns None if the line isn't in that shape.
    """
    m = ADD_LINE_RE.match(user.strip())
    if not m:
        return None
    lat, _, lon = m.group("coords").partition(",")
    return {
        "name": m.group("name").strip(),
        "latitude": lat.strip(),
        "longitude": lon.strip(),
    }


def run_repl(store=None, opener=None, notifier=None):
    if store is None:
        store = DestinationStore()
    if opener is None:
        opener = BrowserOpener()
    if notifier is None:
        notifier = Notifier()
    alert = notifier.notify

    print_header()
    print(WELCOME_TEXT)
    print_destinations(store)
    print("Type /help for commands.")

    # --------------- MAIN LOOP ---------------
    while True:
        try:
            user = input(f"{APP_NAME}> ").strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not user:
            continue
        low = user.lower()

        if low == "/exit":
            break

        if low == "/help":
            print(HELP_TEXT)
            continue

        if low in ("/list", "/destinations"):
            print_destinations(store)
            continue

        if low == "/origin":
            print(f"Origin: {DEFAULT_ORIGIN[0]},{DEFAULT_ORIGIN[1]}  (travel mode: {DEFAULT_TRAVEL_MODE})")
            continue

        # ---------- add ----------
        if low == "/add":
            dest = run_add_form(store, alert)
            if dest is not None:
                alert(f"Saved destination '{dest.name}' as #{dest.id}.")
                print_destinations(store)
            continue

        if low.startswith("/add "):
            candidate = parse_add_line(user)
            if candidate is None:
                print("Usage: /add <name> = <lat>,<lon>   (or just /add for the form)")
                continue
            try:
                dest = add_destination(store, candidate)
            except ValidationError as e:
                alert(e.message)
                continue
            alert(f"Saved destination '{dest.name}' as #{dest.id}.")
            print_destinations(store)
            continue

        # ---------- remove ----------
        if low == "/remove" or low.startswith("/remove "):
            parts = user.split(maxsplit=1)
            if len(parts) < 2:
                print("Usage: /remove <id>")
                continue
            remove_destination(store, parts[1].strip())
            print_destinations(store)
            continue

        # ---------- go ----------
        if low == "/go" or low.startswith("/go "):
            parts = user.split()
            if len(parts) < 2:
                print("Usage: /go <id> [travelmode]")
                continue
            dest = store.get(parts[1])
            if dest is None:
                print(f"(No destination #{parts[1]}. Use /list to see ids.)")
                continue
            travel_mode = parts[2] if len(parts) > 2 else DEFAULT_TRAVEL_MODE
            if travel_mode not in TRAVEL_MODES:
                # passed through anyway; maps decides what to do with it
                print(f"(Unknown travel mode '{travel_mode}', sending it as-is.)")
            try:
                url = go_to_destination(dest, opener, travel_mode=travel_mode)
            except OpenError as e:
                alert(e.message)
                continue
            print(f"Opening navigation to '{dest.name}' → {dest.latitude},{dest.longitude}\nURL: {url}")
            continue

        # ---------- TTS ----------
        if low == "/tts" or low.startswith("/tts "):
            parts = low.split(maxsplit=1)
            arg = parts[1].strip() if len(parts) > 1 else ""
            if arg not in ("on", "off"):
                print("Usage: /tts on|off")
                continue
            if not notifier.set_speech(arg == "on"):
                print("(TTS unavailable. Install pyttsx3.)")
                continue
            print(f"(TTS {'enabled' if notifier.speech_on else 'disabled'})")
            continue

        if low == "/voices":
            voices = notifier.voices()
            if not voices:
                print("(No voices found or TTS unavailable.)")
            else:
                for i, name, lang in voices:
                    lang_str = f" {lang}" if lang else ""
                    print(f"{i}: {name}{lang_str}")
            continue

        print("Unknown command. Type /help for the list.")


if __name__ == "__main__":
    run_repl()
