from .conversion_controller import ConversionController

__all__ = ['ConversionController']
