from enum import StrEnum

import pygame


class ControlAction(StrEnum):
    SWAP_MODE = "swap_mode"
    TOGGLE_PAUSE = "toggle_pause"
    QUIT = "quit"


KEY_BINDINGS: dict[int, ControlAction] = {
    pygame.K_SPACE: ControlAction.TOGGLE_PAUSE,
    pygame.K_p: ControlAction.TOGGLE_PAUSE,
    pygame.K_TAB: ControlAction.SWAP_MODE,
    pygame.K_m: ControlAction.SWAP_MODE,
    pygame.K_ESCAPE: ControlAction.QUIT,
    pygame.K_q: ControlAction.QUIT,
}


def action_for_key(key: int) -> ControlAction | None:
    return KEY_BINDINGS.get(key)
