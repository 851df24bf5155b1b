"""
Core Domain Layer.

Pure deinflection logic with no dependency on frameworks or the filesystem.
Static tables reach the core only through the descriptor source port.
"""
