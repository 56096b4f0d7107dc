GRAMMAR = r"""

rule_body: chain ("|" chain)*
chain: RULE_TOKEN*

// Anything that is not whitespace or a pipe. The transformer decides
// whether a token is a valid rule reference.
RULE_TOKEN: /[^\s|]+/

%ignore WHITESPACE
WHITESPACE: /\s+/
"""

LITERAL_QUOTE = '"'

RULE_SEPARATOR = ': '
