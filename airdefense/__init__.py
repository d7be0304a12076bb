"""An arcade game of shooting down airplanes with homing missiles."""

__version__ = "0.1.0"
__all__ = ["__version__"]