"""purelint — exemption resolution for immutability lint rules."""

__version__ = "0.1.0"
