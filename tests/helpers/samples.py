"""Sample .properties sources.

Each helper builds a fresh string per call so no test shares mutable input.
"""

from __future__ import annotations


def wikipedia_sample() -> str:
    """The example file from https://en.wikipedia.org/wiki/.properties."""
    return (
        '# You are reading a comment in ".properties" file.\n'
        "! The exclamation mark can also be used for comments.\n"
        '# Lines with "properties" contain a key and a value separated by a delimiting character.\n'
        "# There are 3 delimiting characters: '=' (equal), ':' (colon) and whitespace "
        "(space, \\t and \\f).\n"
        "website = https://en.wikipedia.org/\n"
        'language : "English"\r\n'
        "topic .properties files\n"
        "# A word on a line will just create a key with no value.\n"
        "empty\n"
        "# White space that appears between the key, the value and the delimiter is ignored.\n"
        "# This means that the following are equivalent (other than for readability).\n"
        "hello=hello\r\n"
        'hello = "hello"\n'
        "# Keys with the same name will be overwritten by the key that is the furthest in a file.\n"
        '# For example the final value for "duplicateKey" will be "second".\n'
        "duplicateKey = first\r\n"
        "duplicateKey = second\n"
        "# To use the delimiter characters inside a key, you need to escape them with a \\.\n"
        "# However, there is no need to do this in the value.\n"
        "delimiterCharacters\\:\\=\\  = "
        'This is the value for the key "delimiterCharacters\\:\\=\\ "\n'
        "# Adding a \\ at the end of a line means that the value continues to the next line.\n"
        "multiline = This line \\\n"
        "continues\n"
        "# If you want your value to include a \\, it should be escaped by another \\.\n"
        "path = c:\\\\wiki\\\\templates\n"
        "# This means that if the number of \\ at the end of the line is even, "
        "the next line is not included in the value.\n"
        "evenKey = This is on one line\\\\\n"
        '# This line is a normal comment and is not included in the value for "evenKey"\n'
        "# If the number of \\ is odd, then the next line is included in the value.\n"
        "oddKey = This is line one and\\\\\\\n"
        "        # This is line two\n"
        "# White space characters are removed before each line.\n"
        "# Make sure to add your spaces before your \\ if you need them on the next line.\n"
        "welcome = Welcome to \\\r\n"
        "          Wikipedia!\n"
        "# If you need to add newlines and carriage returns, "
        "they need to be escaped using \\n and \\r respectively.\n"
        "# You can also optionally escape tabs with \\t for readability purposes.\n"
        "valueWithEscapes=This is a newline\\n and a carriage return\\r and a tab\\t.\n"
    )


DELIMITER_KEY = "delimiterCharacters\\:\\=\\ "
"""Key of the escaped-delimiter entry in wikipedia_sample(), backslashes kept."""
