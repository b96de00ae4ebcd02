"""A small lattice-based public-key encryption and key encapsulation scheme."""

__version__ = "0.1.0"