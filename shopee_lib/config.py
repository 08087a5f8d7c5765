"""
Configurações e constantes compartilhadas do cliente Shopee.
"""

# URLs do sistema
BASE_URL = "https://shopee.tw"
COINS_ENDPOINT = "/mkt/coins/api/v1/cs/coins"
CHECKIN_ENDPOINT = "/mkt/coins/api/v2/checkin_new"
SETTINGS_ENDPOINT = "/mkt/coins/api/v2/settings"

# Headers padrão (imitam o navegador que gerou o cookie)
DEFAULT_HEADERS = {
    "accept": "application/json",
    "accept-language": "en-US,en;q=0.8",
    "cache-control": "no-cache",
    "pragma": "no-cache",
    "sec-ch-ua": '"Not.A/Brand";v="8", "Chromium";v="114", "Google Chrome";v="114"',
    "sec-ch-ua-mobile": "?0",
    "sec-ch-ua-platform": '"Windows"',
    "sec-fetch-dest": "empty",
    "sec-fetch-mode": "cors",
    "sec-fetch-site": "same-origin",
}

CHECKIN_HEADERS = {
    "content-type": "application/json;charset=UTF-8",
}

# Cookie com o fingerprint do dispositivo exigido no check-in
DFP_COOKIE_NAME = "shopee_webUnique_ccd"

# Códigos do envelope {code, msg, data}
SUCCESS_CODE = 0
UNAUTHENTICATED_CODE = 401

# userid devolvido pelo servidor quando não há login
LOGGED_OUT_USERID = "-1"

CHECKIN_WINDOW_DAYS = 7

# Configurações de tempo
DEFAULT_TIMEOUT = 30

# Variável de ambiente lida pelo script de linha de comando
COOKIE_ENV_VAR = "SHOPEE_COOKIE"
