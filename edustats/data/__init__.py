"""
Sample sources: text parsing, simulation, presets and transformations.

Public API:
    parse_numbers(text)                 - Free-form text to Sample
    find_invalid_characters(text)       - Characters a form should flag
    format_numbers(values)              - Sample back to text
    generate_gaussian_sample(m, s, n)   - Box-Muller normal sample
    load_scenario(key)                  - Teaching preset samples
    shift/scale/standardize/merge/perturb - Sample transformations
"""

from edustats.data.parser import parse_numbers, find_invalid_characters, format_numbers
from edustats.data.generator import generate_gaussian_sample
from edustats.data.scenarios import (
    Scenario, SCENARIOS, SAMPLE_GRADES, load_scenario, outlier_for,
)
from edustats.data.transforms import shift, scale, standardize, merge, perturb

__all__ = [
    "parse_numbers",
    "find_invalid_characters",
    "format_numbers",
    "generate_gaussian_sample",
    "Scenario",
    "SCENARIOS",
    "SAMPLE_GRADES",
    "load_scenario",
    "outlier_for",
    "shift",
    "scale",
    "standardize",
    "merge",
    "perturb",
]
