COUNTRIES = {
    'Estonia': 'EE',
    'France': 'FR',
    'Germany': 'DE',
    'Ireland': 'IE',
    'Italy': 'IT',
    'Nigeria': 'NG',
    'Poland': 'PL',
    'Russia': 'RU',
    'Spain': 'ES',
    'UK': 'GB',
    'US': 'US',
}

REGIONAL_INDICATOR_A = 0x1F1E6


def flag_emoji(code: str) -> str:
    code = code.upper()
    if len(code) != 2 or not code.isascii() or not code.isalpha():
        raise ValueError(f"Invalid country code: {code!r}")
    return ''.join(chr(REGIONAL_INDICATOR_A + ord(letter) - ord('A')) for letter in code)


def flag_for(country: str) -> str:
    return flag_emoji(COUNTRIES[country])
