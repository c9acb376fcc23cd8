"""Desktop simulator window and in-memory devices.

``SimulatorWindow`` needs pygame and is imported from
``asciirunner.simulator.window`` directly.
"""

from .mock_hardware import MemoryDisplay, ScriptedKeys, ManualClock

__all__ = ["MemoryDisplay", "ScriptedKeys", "ManualClock"]
