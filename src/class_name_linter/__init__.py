"""
Class Name Linter - Static detection of dynamic class bindings in Vue templates.

This library classifies the value of `class` (and other configured) attribute
bindings as static or dynamic and reports every dynamic part, without running
the template.
"""

from __future__ import annotations
