"""Printable HTML standings pages."""

from showjumping.generator.render import ReportGenerator, create_jinja_env

__all__ = ["ReportGenerator", "create_jinja_env"]
