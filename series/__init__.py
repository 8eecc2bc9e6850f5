from .running import RunningMeanConfig, running_mean

__all__ = ["RunningMeanConfig", "running_mean"]
