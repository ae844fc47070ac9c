"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"
    SHIFT_SPECIAL = "shift_special"  # Shift + arrow keys, etc.


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The key name reported by curtsies
    is_alt: bool = False
    is_ctrl: bool = False
    is_shift: bool = False

    @property
    def is_printable(self) -> bool:
        """A single printable character typed with no modifier or only Shift."""
        return (self.key_type == KeyType.REGULAR
                and not (self.is_alt or self.is_ctrl)
                and len(self.value) == 1
                and self.value.isprintable())


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert', 'tab',
}


class KeyboardHandler:
    """Turns terminal key names into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Wait up to timeout seconds for a key; None if nothing arrived."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key name such as 'a', '<LEFT>' or '<Ctrl-j>'."""
        key_str = str(key)

        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_named_key(key_str)

        # Single-byte ASCII control chars (Ctrl-<letter>)
        if len(key_str) == 1:
            o = ord(key_str)
            if o in (8, 127):
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if o == 9:
                return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
                ch = chr(ord('a') + o - 1)
                if ch in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)

        if key_str == '\x1b':
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

    def _parse_named_key(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1]
        # Support both '-' and '+' as modifier separators (e.g., '<Esc+u>')
        parts = name.replace('+', '-').split('-')
        base = parts[-1]
        # Keep the case of a single-letter base ('<Esc+A>') but not of names
        if len(base) != 1:
            base = base.lower()
        if not base:
            # '<Ctrl-->' style token: the base key is the dash itself
            base = '-'
        mods = {m.lower() for m in parts[:-1] if m}
        # Normalize meta/esc prefixes to alt
        if mods & {'meta', 'esc'}:
            mods.add('alt')

        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'
        elif base == 'del':
            base = 'delete'

        if base in ('space', 'spacebar', 'spc') and not mods:
            return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=key_str)
        if base in ('esc', 'escape') and not mods:
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)

        if 'ctrl' in mods and len(base) == 1:
            lower = base.lower()
            if lower in ('j', 'm'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if lower == 'h':
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            return KeyEvent(key_type=KeyType.CTRL, value=lower, raw=key_str, is_ctrl=True)
        if 'alt' in mods:
            return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str, is_alt=True)
        if 'shift' in mods and base in SPECIAL_KEYS:
            return KeyEvent(key_type=KeyType.SHIFT_SPECIAL, value=base, raw=key_str, is_shift=True)
        # Plain specials, plus anything unrecognized (function keys and so on)
        return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)
