"""
Input package: pointer, keyboard and gamepad event sources.
"""
from .input_config import InputConfig, get_input_config, set_input_config
from .pointer import Pointer, PointerEvent, POINTER_DOWN, POINTER_UP, POINTER_MOVE, WHEEL
from .keyboard import Keyboard
from .gamepad import Gamepads
from .dispatcher import InputDispatcher
