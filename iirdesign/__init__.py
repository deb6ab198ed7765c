"""Design of IIR digital filters (Butterworth, Elliptic, Bessel, Legendre, custom) as cascades of second-order sections."""

__version__ = "0.1.0"