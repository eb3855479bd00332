"""Building blocks for audio fingerprinting: base64, bit packing, filters, images and quantizers."""

__version__ = "1.6.0"

__all__ = ["base64url", "bitpack", "gaussian", "gradient", "integral_image", "image", "quantizer"]