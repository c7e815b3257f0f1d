"""
Components package.

Domain logic: layer registry, path resolution, boundary policies and
source scanning. Components depend only on helpers.
"""
