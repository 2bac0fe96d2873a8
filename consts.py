# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

# Canonical alphabet; a character's index is its 5 bit value. Characters that
# read like 0 or 1 are left out.
ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"

# Decode only. Each alias maps onto the canonical character it resembles.
ALIASES = {"o": "0", "i": "1", "l": "1"}

# Trailer appended by Encoder.flush(check=True). Not in the alphabet, so the
# Decoder skips it like any other unknown character.
CHECK_CHAR = "$"

BYTE_BITS = 8
SYMBOL_BITS = 5

BYTE_MASK = (1 << BYTE_BITS) - 1
SYMBOL_MASK = (1 << SYMBOL_BITS) - 1

LOGGING_CONFIG_ENV = "CBASE32_LOGGING_CONFIG"
