"""Field splitting for rows of the decrypted symbol table."""


def tokenize(line: str) -> list[str]:
    """
    Split one table row into fields.

    Commas separate fields except between double quotes. Quote characters
    are kept in the field text and there is no escape sequence, so every
    quote toggles the quoted state. The text after the last separator is
    always emitted, even when empty.
    """
    fields = []
    inside_quote = False
    field_start = 0

    for index, character in enumerate(line):
        if character == '"':
            inside_quote = not inside_quote
        elif character == "," and not inside_quote:
            fields.append(line[field_start:index])
            field_start = index + 1

    fields.append(line[field_start:])
    return fields
