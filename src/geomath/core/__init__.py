"""
Core value types and numeric primitives.

Everything here is synchronous, side-effect free (apart from in-place
mutators touching only the receiver) and independent of I/O.
"""
