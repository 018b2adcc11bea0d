# entities.py

# re‑export everything the simulation and renderer share

from entities_utils import (
    require,
    rects_overlap,
    spans_overlap
)

from entities_player import Player

from entities_platforms import (
    Platform,
    GROUND,
    BLOCK,
    QUESTION,
    BRICK,
    COIN,
    PIPE,
    RANDOM_KINDS
)

from entities_pickups import Coin, draw_coin
