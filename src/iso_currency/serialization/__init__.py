"""Serialization of `Currency` to and from its transport representations.

`transport` has no third-party dependencies. `pydantic_types` requires the `pydantic` extra:
    pip install iso-currency[pydantic]
"""
