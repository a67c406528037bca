"""Scanning an I2C bus for devices that acknowledge their address."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

from semcore.debug import DebugLevel, internal_debug
from semcore.error import ClassId, Error
from semcore.signals import Signal

_MAX_ADDRESS = 0xFF


class _I2cMasterHardware(Protocol):
    error: Signal
    address_found: Signal

    def is_busy_writing(self) -> bool: ...

    def check_address(self, address: int) -> None: ...


class I2cScannerErrorCode(IntEnum):
    """Error codes reported by :class:`I2cScanner`."""

    START_SCAN_IS_BUSY = 0


class I2cScanner:
    """Probes every address in a range and reports those that acknowledge.

    The hardware must provide ``is_busy_writing()``, ``check_address(address)``
    and the signals ``address_found`` (no arguments) and ``error`` (one
    :class:`Error`). For each responding address ``device_found`` is emitted
    with it; after the last address ``finished`` is emitted. If the hardware
    is busy when a scan starts, ``error`` is emitted instead.
    """

    def __init__(self, hardware: _I2cMasterHardware) -> None:
        self._hardware = hardware
        self._address_begin = 0
        self._address_end = 0
        self._address = 0
        self.device_found = Signal()
        self.finished = Signal()
        self.error = Signal()

    def start_scan(self, first_address: int = 0, last_address: int = 0x7F) -> None:
        """Start scanning from ``first_address`` up to ``last_address`` inclusive."""
        for address in (first_address, last_address):
            if not 0 <= address <= _MAX_ADDRESS:
                raise ValueError(f"I2C address out of range: {address}")
        self._log(DebugLevel.INFO, "start_scan", "I2c Scanner - Start")
        if self._hardware.is_busy_writing():
            self._log(DebugLevel.ERROR, "start_scan", "is busy")
            self.error(Error(ClassId.I2C_SCANNER, I2cScannerErrorCode.START_SCAN_IS_BUSY))
            return

        self._address_begin = first_address
        self._address_end = last_address + 1
        self._address = first_address

        self._hardware.error.reconnect(self._on_not_acknowledge)
        self._hardware.address_found.reconnect(self._on_acknowledge)

        self._test_address()

    def _log(self, level: DebugLevel, where: str, fmt: str, *args: object) -> None:
        internal_debug(self, level, f"I2cScanner.{where}", fmt, *args)

    def _test_address(self) -> None:
        if self._address >= self._address_end:
            self._log(DebugLevel.INFO, "_test_address", "I2c Scanner - Finished")
            self.finished()
        else:
            self._hardware.check_address(self._address)

    def _on_acknowledge(self) -> None:
        address = self._address
        self._log(DebugLevel.INFO, "_on_acknowledge", "I2c device found on: 0x%02x", address)
        self._address += 1
        self.device_found(address)
        self._test_address()

    def _on_not_acknowledge(self, thrown: Error) -> None:
        self._address += 1
        self._test_address()