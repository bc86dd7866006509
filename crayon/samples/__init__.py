from .colors import samples_rgb_hsb, samples_chromatic_rgb

__all__ = ["samples_rgb_hsb", "samples_chromatic_rgb"]
