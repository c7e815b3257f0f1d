"""
Interfaces package.

Outer surfaces of fsdlint. Interfaces talk to services only.
"""
