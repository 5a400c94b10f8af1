from .clock import ClockProtocol
from .id_generator import IdGeneratorProtocol

__all__ = ["ClockProtocol", "IdGeneratorProtocol"]
