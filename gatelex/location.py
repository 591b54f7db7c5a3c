# Lines count from 1 and columns from 0, like the positions of the tokenize
# module.
Location = tuple[int, int]

START: Location = (1, 0)


def advanced_by(location: Location, text: str) -> Location:
    """Return the location just past text, if text starts at location."""
    newlines = text.count('\n')
    if not newlines:
        return location[0], location[1] + len(text)
    return location[0] + newlines, len(text) - text.rindex('\n') - 1
