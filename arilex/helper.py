import logging


def error_message(expression: str, location: int, message: str) -> str:
    line_start = expression.rfind("\n", 0, location) + 1
    line_end = expression.find("\n", location)
    if line_end == -1:
        line_end = len(expression)
    messages = [
        f"{expression[line_start:line_end]}\n",
        f"{' ' * (location - line_start)}^ {message}\n",
    ]
    return "".join(messages)


def get_logger(name: str) -> logging.Logger:
    # keep every logger under the "arilex" namespace
    if not (name == "arilex" or name.startswith("arilex.")):
        name = f"arilex.{name}"
    return logging.getLogger(name)
