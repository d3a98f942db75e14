"""Server-rendered pages and fragments.

The same URL answers with a full page or with a single named fragment,
depending on whether the client announced itself as enhancement-aware
(htmx, Unpoly) through a request header.
"""
