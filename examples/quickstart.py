"""Quickstart example for countphrase.

Demonstrates the five count categories, numerals in other locales, and
handling of invalid input.
"""

from countphrase import (
    CountPhraseError,
    CountPhraseFormatter,
    NounForms,
    PhraseRequest,
    format_count,
    format_count_phrase,
)

car = NounForms(singular="سيارة", dual="سيارتان", plural="سيارات")

# Example 1: The five categories
print("=" * 50)
print("Example 1: Zero, One, Two, Few, Many")
print("=" * 50)

for count in (0, 1, 2, 5, 11):
    print(count, "->", format_count_phrase(PhraseRequest(count=count, noun_forms=car)))
# Output:
# 0 -> لا سيارة
# 1 -> سيارة
# 2 -> سيارتان
# 5 -> ٥ سيارات
# 11 -> ١١ سيارة

# Example 2: Fractional and negative counts
print("\n" + "=" * 50)
print("Example 2: Fractional and Negative Counts")
print("=" * 50)

print(format_count(3.7, car))
# Output: ٣٫٧ سيارة
print(format_count(-3, car))
# Output: ٣ سيارات

# Example 3: Always show the numeral
print("\n" + "=" * 50)
print("Example 3: always_show_number")
print("=" * 50)

print(format_count(1, car, always_show_number=True))
# Output: ١ سيارة

# Example 4: Formatter bound to a locale
print("\n" + "=" * 50)
print("Example 4: Latin Digits")
print("=" * 50)

latin = CountPhraseFormatter("en-US")
print(latin.format(7, car))
# Output: 7 سيارات
print(latin.classify(7))
# Output: few

# Example 5: Untrusted input (e.g., decoded JSON)
print("\n" + "=" * 50)
print("Example 5: Validation Errors")
print("=" * 50)

try:
    format_count_phrase({"count": 2, "nounForms": {"singular": "سيارة", "dual": " ", "plural": "سيارات"}})
except CountPhraseError as e:
    print(e)
# Output:
# error[NOUN_FORM_BLANK]: Noun form 'dual' is blank
#   = field: noun_forms.dual
#   = help: Provide the dual inflection of the noun
