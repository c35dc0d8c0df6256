from .pattern import matches, matches_parameters, parse_parameter_pairs

__all__ = ["matches", "matches_parameters", "parse_parameter_pairs"]
