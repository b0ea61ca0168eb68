from .html import guidance_css_variables, page_filename, render_page, theme_css_variables

__all__ = ["guidance_css_variables", "page_filename", "render_page", "theme_css_variables"]
