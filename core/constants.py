"""
Constants and configuration values for Markdown-to-JSON conversion.
"""
import re

# Record keys
TITLE_KEY = 'title'
CONTENT_KEY = 'body'

# Output defaults
DEFAULT_OUTPUT_FILENAME = 'content.json'
JSON_EXTENSION = '.json'
DEFAULT_SOURCE_PATTERN = '**/*.md'

# Front matter block delimiter (must fill the whole line)
FRONT_MATTER_DELIMITER = '---'

# Level-1 ATX heading: single '#', whitespace, text, optional closing hashes
ATX_H1_PATTERN = re.compile(r'^#[ \t]+(.*?)(?:[ \t]+#+)?[ \t]*$')

# Setext level-1 underline
SETEXT_H1_UNDERLINE_PATTERN = re.compile(r'^=+[ \t]*$')

# markdown-it rules switched on by the smartypants option
TYPOGRAPHER_RULES = ['replacements', 'smartquotes']

# GFM extensions enabled on top of the commonmark preset
GFM_RULES = ['table', 'strikethrough']

DEFAULT_RENDERER_PRESET = 'commonmark'
