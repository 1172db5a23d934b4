# -*- coding: utf-8 -*-
"""
The 'api' package serves the reconnaissance tools over HTTP with FastAPI.
"""
