from dataclasses import dataclass


@dataclass
class RangeMapOptions:
    # diagnostics
    warn_on_residual_overlap: bool = True
    log_merges: bool = True
