"""
Lancer marketplace server functions.
Escrow payment confirmation and notification email dispatch.
"""

__version__ = "1.0.0"
