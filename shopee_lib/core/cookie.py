"""
Leitura do header Cookie.
"""

from typing import Dict


def parse_cookie(raw: str) -> Dict[str, str]:
    """
    Converte 'a=1; b=2' em {'a': '1', 'b': '2'}.

    Valores continuam com percent-encoding. Segmentos sem '=' sao ignorados;
    em nomes repetidos vale o ultimo.
    """
    cookies: Dict[str, str] = {}
    if not raw:
        return cookies

    for segment in raw.split(";"):
        segment = segment.strip()
        if "=" not in segment:
            continue
        name, _, value = segment.partition("=")
        name = name.strip()
        if not name:
            continue
        cookies[name] = value.strip()
    return cookies
