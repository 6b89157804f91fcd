"""Query interpretation and validation.

The intent layer converts an English natural-language climate question and its extracted entities
into a strict `Query` object, which is then used to build a deterministic data request.
"""
