from toolz import pipe


# Adds one to a big-endian bit string without changing its length:
# the trailing run of '1's becomes '0's and the '0' before it becomes '1'.
# e.g. "0111" -> "1000", "110" -> "111"
def increment_code(code: str) -> str:
    last_zero = code.rfind("0")
    if last_zero < 0:
        return "0" * len(code)
    return code[:last_zero] + "1" + "0" * (len(code) - last_zero - 1)


# Make canonical codes from the code length of every symbol
def assign_canonical_codes(lengths: list[tuple[int, str]]) -> dict[str, str]:
    # Sort by the length of the code and then by the symbol
    table: list[tuple[int, str]] = pipe(
        lengths,
        lambda arg: sorted(arg, key=lambda x: (x[0], x[1])),
        list,
    )
    if not table:
        return {}

    codes: dict[str, str] = {}
    first_length, first_symbol = table[0]
    current_code = "0" * first_length
    codes[first_symbol] = current_code
    for length, symbol in table[1:]:
        current_code = increment_code(current_code)
        # Each time the code length increases, zeros are appended to the end of the code.
        current_code = current_code.ljust(length, "0")
        codes[symbol] = current_code
    return codes
