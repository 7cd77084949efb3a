"""
gendex: Build-time DEX embedding for the mobile toolchain.

Compiles the platform-support Java sources against an installed Android SDK,
links them into a DEX file and emits the result as a base64 string literal in a
generated Python module, so the toolchain never needs the SDK at runtime.
"""

__version__ = "1.0.0"
__author__ = "gendex Team"
