from .sequential import SamplerConfig, sample_sequence

__all__ = ["SamplerConfig", "sample_sequence"]
