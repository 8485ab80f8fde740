import json
from dataclasses import asdict, replace

from . import password as pw
from . import utils
from .errors import GenerationError
from .strength import assess

PROMPT = "pwgen> "

HELP = """
Available commands:
  generate                       Generate passwords with current settings
  set <option> <value>           Change a setting
  show                           Show current settings
  check <password>               Check password strength
  help                           Show help
  exit                           Exit the program

Options to set:
  length                         Password length (number)
  lowercase                      Include lowercase (true/false)
  uppercase                      Include uppercase (true/false)
  numbers                        Include numbers (true/false)
  symbols                        Include symbols (true/false)
  exclude-similar                Exclude similar characters (true/false)
  exclude-ambiguous              Exclude ambiguous characters (true/false)
  require-all                    Require all character types (true/false)
  max-consecutive                Maximum consecutive identical characters (number)
  count                          Number of passwords to generate (number)
"""

# option name -> GenerationOptions field
_BOOL_OPTIONS = {
    "lowercase": "include_lowercase",
    "uppercase": "include_uppercase",
    "numbers": "include_numbers",
    "symbols": "include_symbols",
    "exclude-similar": "exclude_similar",
    "exclude-ambiguous": "exclude_ambiguous",
    "require-all": "require_all_categories",
}
# option name -> (field, fallback for unparsable values)
_INT_OPTIONS = {
    "length": ("length", 12),
    "max-consecutive": ("max_consecutive", 0),
}


def _parse_int(value: str, fallback: int) -> int:
    try:
        return int(value) or fallback
    except ValueError:
        return fallback


class Session:
    """Mutable settings for one interactive run."""

    def __init__(self, options: pw.GenerationOptions, count: int = 1, rng=None,
                 max_attempts: int = pw.MAX_ATTEMPTS):
        self.options = options
        self.count = count
        self.rng = rng
        self.max_attempts = max_attempts

    def set(self, option: str, value: str) -> str:
        if option == "count":
            self.count = max(1, _parse_int(value, 1))
            return f"Set {option} to {value}"
        if option in _BOOL_OPTIONS:
            changes = {_BOOL_OPTIONS[option]: value == "true"}
        elif option in _INT_OPTIONS:
            field, fallback = _INT_OPTIONS[option]
            changes = {field: _parse_int(value, fallback)}
        else:
            return f"Unknown option: {option}"
        try:
            self.options = replace(self.options, **changes)
        except ValueError as e:
            return f"Invalid value for {option}: {e}"
        return f"Set {option} to {value}"

    def generate(self):
        lines = []
        for _ in range(self.count):
            try:
                lines.append(pw.generate_password(self.options, rng=self.rng,
                                                  max_attempts=self.max_attempts))
            except GenerationError as e:
                lines.append(utils.describe_error(e))
                break
        return lines

    def show(self) -> str:
        settings = asdict(self.options)
        settings["count"] = self.count
        return json.dumps(settings, indent=2)


def check(password: str) -> str:
    result = assess(password)
    data = result.to_dict()
    return (f"Strength: {data['strength']} (score: {data['score']})\n"
            f"Details: {json.dumps(data['details'], indent=2)}")


def run_interactive(session: Session):
    print("Password Generator Interactive Mode")
    print('Type "help" for available commands')
    while True:
        try:
            line = input(PROMPT).strip()
        except EOFError:
            print()
            break
        if not line:
            continue
        command, _, rest = line.partition(" ")
        command = command.lower()
        rest = rest.strip()

        if command == "generate":
            for out in session.generate():
                print(out)
        elif command == "set":
            parts = rest.split()
            if len(parts) < 2:
                print("Usage: set <option> <value>")
                continue
            print(session.set(parts[0], parts[1]))
        elif command == "show":
            print("Current settings:")
            print(session.show())
        elif command == "check":
            if not rest:
                print("Usage: check <password>")
                continue
            print(check(rest))
        elif command == "help":
            print(HELP)
        elif command in ("exit", "quit"):
            break
        else:
            print(f"Unknown command: {command}")
            print('Type "help" for available commands')
    print("Goodbye!")
