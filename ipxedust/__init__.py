"""
ipxedust - embedded iPXE binaries

Ships prebuilt iPXE boot loaders, an iPXE ISO and board DTBs, and patches
the magic string in their embedded script per request so a network boot
server can change boot behavior without rebuilding iPXE.
"""

__version__ = "1.0.0"
