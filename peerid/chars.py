UPPER_LETTERS = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
LOWER_LETTERS = 'abcdefghijklmnopqrstuvwxyz'
DIGITS = '0123456789'
OTHER_CHARS = '!"#$%&\'()*+,-./:;<=>?@[]^_`{|}~'
LETTERS = UPPER_LETTERS + LOWER_LETTERS

# Each character is a number from 0 to 63, its position is its value.
# '0'=0, ..., '9'=9, 'A'=10, ..., 'Z'=35, 'a'=36, ..., 'z'=61, '.'=62, '-'=63
SHADOW_STYLE_VERSION_CHARS = DIGITS + UPPER_LETTERS + LOWER_LETTERS + '.-'

VISIBLE_CHARS = LETTERS + DIGITS + OTHER_CHARS

def is_upper_case_letter(char):
    return ord('A') <= char <= ord('Z')

def is_lower_case_letter(char):
    return ord('a') <= char <= ord('z')

def is_letter(char):
    return is_upper_case_letter(char) or is_lower_case_letter(char)

def is_digit(char):
    return ord('0') <= char <= ord('9')

def is_visible(char):
    """Printable ASCII, 0x20-0x7E (95 characters)."""
    return 32 <= char <= 126

if __name__ == '__main__':
    print(len(SHADOW_STYLE_VERSION_CHARS), len(VISIBLE_CHARS))
    print([is_visible(ord(c)) for c in ' ~\x7f'])
