import json
import logging

import regex

def ParseDelayFromHeader(value : str|None) -> float|None:
    """
    Try to figure out how long a suggested retry-after is, in seconds.

    Accepts plain seconds ("5") or a number with a unit ("500ms", "10s", "2m").
    Returns None if the value cannot be interpreted.
    """
    if not isinstance(value, str) or not value.strip():
        return None

    match = regex.fullmatch(r"\s*([0-9]+(?:\.[0-9]+)?)\s*([a-zA-Z]+)?\s*", value)
    if not match:
        logging.debug(f"Unable to parse retry delay '{value}'")
        return None

    delay = float(match.group(1))
    unit = (match.group(2) or 's').lower()
    if unit == 's':
        return delay
    elif unit == 'ms':
        return delay / 1000
    elif unit == 'm':
        return delay * 60

    logging.debug(f"Unexpected time unit '{unit}' in retry delay '{value}'")
    return None

def ParseErrorMessageFromText(value : str) -> str|None:
    """
    Try to extract a human-friendly error message from an HTTP response body.

    Accepts a JSON object (e.g. {"error": {"message": "..."}}) or text containing an embedded JSON object.
    Returns the extracted message if found, otherwise None.
    """
    if not isinstance(value, str):
        return None

    text = value.strip()

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = None
        brace_start = text.find('{')
        brace_end = text.rfind('}')
        if brace_start != -1 and brace_end > brace_start:
            try:
                data = json.loads(text[brace_start:brace_end + 1])
            except json.JSONDecodeError:
                pass

    if isinstance(data, dict):
        err = data.get('error')
        if isinstance(err, dict):
            for key in ('message', 'Message', 'msg', 'description', 'detail'):
                val = err.get(key)
                if isinstance(val, str) and val.strip():
                    return val.strip()

        elif isinstance(err, str) and err.strip():
            return err.strip()

        for key in ('message', 'error_message', 'detail', 'description'):
            val = data.get(key)
            if isinstance(val, str) and val.strip():
                return val.strip()

    match = regex.search(r'"message"\s*:\s*"((?:[^"\\]|\\.)*)"', text)
    if match:
        raw = match.group(1)
        try:
            return json.loads(f'"{raw}"')
        except json.JSONDecodeError:
            return raw

    return None

def ParseLanguageList(value : str|list[str]|None) -> list[str]:
    """
    Parse language codes from a comma or semicolon separated string, or a list of such strings
    """
    if not value:
        return []

    if isinstance(value, str):
        value = [ value ]

    languages = []
    for item in value:
        for language in regex.split(r"[;,]", item):
            language = language.strip()
            if language and language not in languages:
                languages.append(language)

    return languages
