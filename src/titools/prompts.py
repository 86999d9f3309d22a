"""Interactive prompts shared by the titools commands."""

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _print_choices(choices: list, checked=None) -> None:
    for number, (label, value) in enumerate(choices, start=1):
        mark = ""
        if checked is not None:
            mark = "[x] " if value in checked else "[ ] "
        print(f"  {number}) {mark}{label}")


def _parse_number(answer: str, count: int):
    if not answer.isdigit():
        return None
    number = int(answer)
    return number if 1 <= number <= count else None


# ---------------------------------------------------------------------------
# Public interface
# ---------------------------------------------------------------------------


def prompt_yes_no(question: str, default: bool = True) -> bool:
    hint = "[Y/n]" if default else "[y/N]"
    while True:
        answer = input(f"{question} {hint}: ").strip().lower()
        if answer == "":
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        print("  Please enter y or n.")


def choose_one(question: str, choices: list, default: int = 1):
    """
    Show a numbered menu of (label, value) pairs and return the chosen value.
    An empty answer picks the default (1-based).
    """
    print(f"\n{question}")
    _print_choices(choices)
    while True:
        answer = input(f"Choice [{default}]: ").strip()
        if answer == "":
            return choices[default - 1][1]
        number = _parse_number(answer, len(choices))
        if number is not None:
            return choices[number - 1][1]
        print(f"  Please enter a number between 1 and {len(choices)}.")


def choose_many(question: str, choices: list, checked=()) -> list:
    """
    Multi-select over (label, value) pairs.

    The user answers with comma-separated numbers; an empty answer keeps the
    pre-checked values. At least one value must be selected.
    """
    print(f"\n{question}")
    _print_choices(choices, checked=set(checked))
    while True:
        answer = input("Numbers, comma-separated (empty for defaults): ").strip()
        if answer == "":
            selected = [value for _, value in choices if value in checked]
        else:
            numbers = [
                _parse_number(part.strip(), len(choices)) for part in answer.split(",")
            ]
            if None in numbers:
                print(f"  Please enter numbers between 1 and {len(choices)}.")
                continue
            selected = [choices[n - 1][1] for n in sorted(set(numbers))]

        if selected:
            return selected
        print("  Please select at least one option.")
