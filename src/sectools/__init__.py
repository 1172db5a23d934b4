# -*- coding: utf-8 -*-
"""
sectools: network reconnaissance utilities exposed over a small HTTP API and
a command line interface.

The 'reconnaissance' package holds the concurrent TCP port scanner and the
DNS record lookup; the 'api' package serves them with FastAPI.
"""

__version__ = "1.0.0"
