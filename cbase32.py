# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Human typeable base32.

Bytes are read as one bitstream, most significant bit first, and cut into
5 bit groups; each group becomes one character of consts.ALPHABET. Decoding
is case insensitive, accepts the aliases in consts.ALIASES and silently skips
every character it does not know.

    encoder = Encoder()
    text = encoder.ingest(part1)
    text += encoder.ingest(part2)
    text += encoder.flush()
"""

import llog

import logging
from types import MappingProxyType

import consts
from consts import BYTE_BITS, BYTE_MASK, SYMBOL_BITS, SYMBOL_MASK

log = logging.getLogger(__name__)

def build_table(alphabet, aliases):
    "Return a read only char -> value mapping for alphabet plus aliases."

    table = {}

    for value, char in enumerate(alphabet):
        table[char.lower()] = value

    # Aliases go in after the alphabet so they can point at it.
    for alias, target in aliases.items():
        target = target.lower()
        assert target in table, target
        table[alias.lower()] = table[target]

    return MappingProxyType(table)

SYMBOLS = build_table(consts.ALPHABET, consts.ALIASES)

def lookup(char):
    "Return the 5 bit value of char, or None if it is not a symbol."
    return SYMBOLS.get(char.lower())

def _as_bytes(data):
    if isinstance(data, str):
        return data.encode()
    if isinstance(data, (bytes, bytearray)):
        return data
    return bytes(data)

def _as_text(data):
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode("latin-1")
    return data

class Encoder(object):
    """Streaming bytes -> symbols converter.

    Bits of the current 5 bit group that are already read but not yet
    emitted are kept in _carry; _carry_bits says how many of them there
    are, and is always in [0, SYMBOL_BITS).
    """

    def __init__(self):
        self._carry = 0
        self._carry_bits = 0
        self._output = []

    def read_byte(self, byte):
        if type(byte) is str:
            byte = ord(byte)

        if not 0 <= byte <= BYTE_MASK:
            raise ValueError("byte must be in range(0, 256)")

        acc = (self._carry << BYTE_BITS) | byte
        nbits = self._carry_bits + BYTE_BITS

        # One byte completes one or two symbols.
        while nbits >= SYMBOL_BITS:
            nbits -= SYMBOL_BITS
            self._output.append(\
                consts.ALPHABET[(acc >> nbits) & SYMBOL_MASK])

        self._carry = acc & ((1 << nbits) - 1)
        self._carry_bits = nbits

    def ingest(self, data):
        data = _as_bytes(data)

        for byte in data:
            self.read_byte(byte)

        if log.isEnabledFor(logging.DEBUG):
            log.debug("Encoded {} bytes; carrying {} bits."\
                .format(len(data), self._carry_bits))

        return self._drain()

    def flush(self, check=False):
        if self._carry_bits:
            # Pad the last group with zero bits on the low side.
            value = self._carry << (SYMBOL_BITS - self._carry_bits)
            self._output.append(consts.ALPHABET[value])

        if check:
            self._output.append(consts.CHECK_CHAR)

        self._carry = 0
        self._carry_bits = 0

        return self._drain()

    def update(self, data, final=False):
        output = self.ingest(data)
        if final:
            output += self.flush()
        return output

    def _drain(self):
        output = "".join(self._output)
        self._output.clear()
        return output

class Decoder(object):
    """Streaming symbols -> bytes converter, the mirror of Encoder.

    _acc holds the _acc_bits (0 to 7) bits read that do not yet make a byte.
    """

    def __init__(self):
        self._acc = 0
        self._acc_bits = 0
        self._output = bytearray()

    def read_char(self, char):
        if type(char) is int:
            char = chr(char)

        value = lookup(char)
        if value is None:
            # Not a symbol; skip it.
            return

        self._acc = (self._acc << SYMBOL_BITS) | value
        self._acc_bits += SYMBOL_BITS

        if self._acc_bits >= BYTE_BITS:
            self._acc_bits -= BYTE_BITS
            self._output.append(self._acc >> self._acc_bits)
            self._acc &= (1 << self._acc_bits) - 1

    def ingest(self, text):
        text = _as_text(text)

        for char in text:
            self.read_char(char)

        if log.isEnabledFor(logging.DEBUG):
            log.debug("Decoded {} chars; holding {} bits."\
                .format(len(text), self._acc_bits))

        return self._drain()

    def flush(self, check=False):
        # check is only there to mirror Encoder.flush(); it changes nothing.
        if self._acc_bits and log.isEnabledFor(logging.DEBUG):
            log.debug("Dropping {} trailing bits.".format(self._acc_bits))

        self._acc = 0
        self._acc_bits = 0

        return self._drain()

    def update(self, text, final=False):
        output = self.ingest(text)
        if final:
            output += self.flush()
        return output

    def _drain(self):
        output = bytes(self._output)
        self._output.clear()
        return output

def encode(data):
    "Bytes in, base32 text out."
    encoder = Encoder()
    return encoder.ingest(data) + encoder.flush()

def decode(text):
    "Base32 text in, bytes out."
    decoder = Decoder()
    return decoder.ingest(text) + decoder.flush()
