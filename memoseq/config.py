import sys
from dataclasses import dataclass, replace

# largest index a python list can address
DEFAULT_MAX_INDEX = sys.maxsize - 1
DEFAULT_MAX_SCAN = 100_000


@dataclass(frozen=True)
class EngineConfig:
    """configuration for a sequence generator"""
    max_index: int = DEFAULT_MAX_INDEX
    check_rules: bool = True  # guard rule reads and raise MalformedRule
    verify_determinism: bool = False  # compute every new element twice and compare
    thread_safe: bool = True  # serialize get() per generator
    max_scan: int = DEFAULT_MAX_SCAN  # elements index_of/take_while examine when no limit is given

    def __post_init__(self):
        if not isinstance(self.max_index, int) or isinstance(self.max_index, bool):
            raise TypeError("max_index must be an integer")
        if not 0 <= self.max_index <= DEFAULT_MAX_INDEX:
            raise ValueError(f"max_index must be between 0 and {DEFAULT_MAX_INDEX}")
        if not isinstance(self.max_scan, int) or isinstance(self.max_scan, bool):
            raise TypeError("max_scan must be an integer")
        if self.max_scan < 1:
            raise ValueError("max_scan must be at least 1")

    def with_options(self, **changes) -> 'EngineConfig':
        """derive a new config with some fields replaced"""
        return replace(self, **changes)


DEFAULT_CONFIG = EngineConfig()
