# tts.py
# User-visible notices. Every notice is printed; with speech turned on it's
# also read out (pyttsx3, or macOS 'say' as a fallback).

import os
import subprocess
import sys
from shutil import which

from config import (
    TTS_ENABLED_DEFAULT,
    TTS_RATE_DEFAULT,
    TTS_VOICE_INDEX_DEFAULT,
)


def _has_pyttsx3():
    try:
        import pyttsx3  # noqa
        return True
    except ImportError:
        return False


class Notifier:
    """
    Shows notices to the user and owns the speech settings for the session.

    speech_on is only ever True when a backend exists. Speech failures are
    reported under TTS_DEBUG and otherwise ignored: the printed notice has
    already gone out.
    """

    def __init__(self, speech_on=TTS_ENABLED_DEFAULT, voice_index=TTS_VOICE_INDEX_DEFAULT, rate=TTS_RATE_DEFAULT):
        self.debug = os.getenv("TTS_DEBUG", "0") == "1"
        self.has_pyttsx3 = _has_pyttsx3()
        self.has_say = (sys.platform == "darwin" and which("say") is not None)
        self.voice_index = voice_index
        self.rate = rate
        self.speech_on = bool(speech_on) and self.can_speak

    @property
    def can_speak(self):
        return self.has_pyttsx3 or self.has_say

    def set_speech(self, on: bool) -> bool:
        """Turn speech on/off. Returns False if asked to turn on with no backend."""
        if on and not self.can_speak:
            return False
        self.speech_on = on
        return True

    def notify(self, text):
        print(f"({text})")
        if self.speech_on:
            self._speak(text)

    def _speak(self, text):
        if self.has_pyttsx3 and self._speak_pyttsx3(text):
            return
        if self.has_say:
            try:
                subprocess.run(["say", text], check=True)
            except (OSError, subprocess.CalledProcessError) as e:
                if self.debug:
                    print(f"(TTS: say failed: {e})")
        elif self.debug:
            print("(TTS: no available backend)")

    def _speak_pyttsx3(self, text):
        try:
            import pyttsx3
            eng = pyttsx3.init()
            voices = eng.getProperty("voices") or []
            if self.voice_index is not None and 0 <= self.voice_index < len(voices):
                eng.setProperty("voice", voices[self.voice_index].id)
            if self.rate is not None:
                eng.setProperty("rate", self.rate)
            eng.say(text)
            eng.runAndWait()
            eng.stop()
            return True
        except Exception as e:
            # no audio driver and the like; let 'say' have a go
            if self.debug:
                print(f"(TTS: pyttsx3 failed: {e})")
            return False

    def voices(self):
        """[(index, name, lang), ...] for /voices."""
        if self.has_pyttsx3:
            try:
                import pyttsx3
                eng = pyttsx3.init()
                found = eng.getProperty("voices") or []
                eng.stop()
                return [
                    (i, getattr(v, "name", ""), (getattr(v, "languages", None) or [""])[0])
                    for i, v in enumerate(found)
                ]
            except Exception as e:
                if self.debug:
                    print(f"(TTS: couldn't list voices: {e})")

        if self.has_say:
            try:
                res = subprocess.run(["say", "-v", "?"], capture_output=True, text=True)
            except OSError as e:
                if self.debug:
                    print(f"(TTS: say failed: {e})")
                return []
            lines = [ln.strip() for ln in res.stdout.splitlines() if ln.strip()]
            return [(i, ln, "") for i, ln in enumerate(lines)]

        return []
