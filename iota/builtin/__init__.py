from iota.builtin.primitives import PRIMITIVES, Primitive, standard_primitives, extend_primitives

__all__ = ["PRIMITIVES", "Primitive", "standard_primitives", "extend_primitives"]
