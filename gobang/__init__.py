"""15x15 五子棋 (二人対戦)"""

__version__ = "0.1.0"
