"""
PrintDesk - order, colour and filament tracking for a 3D printing workshop
"""
__version__ = "1.0.0"
