import os
import sys

# Headless pygame for every test module.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
