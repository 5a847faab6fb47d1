# Schemer: a tree-walking evaluator for a small Scheme-like language.
#
# Source text is read into syntax nodes (schemer.reader), converted once into
# values (schemer.types) and evaluated against a chain of environments
# (schemer.evaluation). Special forms are native procedures that receive
# their operands unevaluated, so there is no separate macro layer.

__version__ = "0.1.0"
