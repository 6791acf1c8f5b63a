"""Quickstart example for pluralengine.

This example demonstrates plural category selection and substitution lookup
with the rules bundled in Babel's CLDR data.

Note: Examples do not catch UnknownPluralRulesError for brevity. In
production, decide on a default locale and fall back to it explicitly.
"""

from decimal import Decimal

from pluralengine import RuleFamily, compute_operands, pluralize, resolve

# Example 1: Cardinal categories
print("=" * 50)
print("Example 1: Cardinal Categories")
print("=" * 50)

for locale in ("en", "fr", "ru", "ar", "lv"):
    categories = [resolve(number, locale) for number in (0, 1, 2, 5, 11, 21)]
    print(f"{locale}: {', '.join(categories)}")
# Output (en): other, one, other, other, other, other

# Example 2: Visible fraction digits
print("\n" + "=" * 50)
print("Example 2: Visible Fraction Digits")
print("=" * 50)

print(resolve(1, "en"))
# Output: one
print(resolve(Decimal("1.0"), "en"))
# Output: other
print(resolve(1.0, "en", precision=0))
# Output: one
print(compute_operands(Decimal("1.20")))
# Output: PluralOperands(n=Decimal('1.20'), i=1, v=2, w=1, f=20, t=2, e=0)

# Example 3: Substitutions
print("\n" + "=" * 50)
print("Example 3: Substitutions")
print("=" * 50)

files = {"one": "plik", "few": "pliki", "many": "plików", "other": "pliku"}
for count in (1, 2, 5, Decimal("1.5")):
    print(f"{count} {pluralize(count, 'pl', files)}")
# Output: 1 plik / 2 pliki / 5 plików / 1.5 pliku

# Example 4: Ordinals
print("\n" + "=" * 50)
print("Example 4: Ordinal Suffixes")
print("=" * 50)

suffixes = {"one": "st", "two": "nd", "few": "rd", "other": "th"}
print(" ".join(
    f"{n}{pluralize(n, 'en', suffixes, family=RuleFamily.ORDINAL)}"
    for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23, 101, 111)
))
# Output: 1st 2nd 3rd 4th 11th 12th 13th 21st 22nd 23rd 101st 111th

# Example 5: Regional locales
print("\n" + "=" * 50)
print("Example 5: Regional Locales")
print("=" * 50)

print(resolve(0, "pt-BR"), resolve(0, "pt-PT"))
# Output: one other  (pt-BR falls back to pt; pt-PT has its own rules)

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
