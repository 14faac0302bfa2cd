from retirement_projection.config.loaders import ConfigLoadError, load_household_config
from retirement_projection.projections.assembler import assemble_projection_table, find_retirement_projection
from retirement_projection.projections.runner import YearProjection, run_household, run_projection

__all__ = [
    'ConfigLoadError',
    'YearProjection',
    'assemble_projection_table',
    'find_retirement_projection',
    'load_household_config',
    'run_household',
    'run_projection',
]
