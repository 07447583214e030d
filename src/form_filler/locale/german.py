"""ドイツ語キーワード辞書

3文字以下の語（'tel', 'ort' など）は語境界付きで照合し、
'telephone' のような英単語の一部を置換しない。
"""

from .keyword_dictionary import KeywordDictionary

GERMAN_KEYWORDS = [
    ('bestätigen sie ihr passwort', 'password'),
    ('passwort wiederholen', 'password'),
    ('passwort bestätigen', 'password'),
    ('e-mail-adresse', 'email'),
    ('geburtsdatum', 'birthday'),
    ('postleitzahl', 'zipcode'),
    ('telefonnummer', 'phone'),
    ('mobilnummer', 'phone'),
    ('handynummer', 'phone'),
    ('benutzername', 'username'),
    ('firmenname', 'company'),
    ('kreditkartennummer', 'credit_card'),
    ('kontoinhaber', 'account_name'),
    ('sicherheitscode', 'credit_card_cvv'),
    ('gültig bis', 'date'),
    ('straße und hausnummer', 'address'),
    ('nachname', 'lastname'),
    ('vorname', 'firstname'),
    ('passwort', 'password'),
    ('anschrift', 'address'),
    ('adresse', 'address'),
    ('straße', 'address'),
    ('hausnummer', 'building'),
    ('wohnort', 'city'),
    ('stadt', 'city'),
    ('bundesland', 'state'),
    ('land', 'country'),
    ('kanton', 'state'),
    ('geschlecht', 'sex'),
    ('alter', 'age'),
    ('webseite', 'url'),
    ('homepage', 'url'),
    ('beruf', 'job_title'),
    ('funktion', 'job_title'),
    ('abteilung', 'department'),
    ('bemerkung', 'description'),
    ('nachricht', 'description'),
    ('kommentar', 'description'),
    ('suche', 'search'),
    ('preis', 'price'),
    ('menge', 'number'),
    ('anzahl', 'number'),
    ('name', 'name'),
    ('ort', 'city'),
    ('plz', 'zipcode'),
    ('tel', 'phone'),
    ('fax', 'phone'),
]

GERMAN = KeywordDictionary(
    language='de',
    entries=GERMAN_KEYWORDS,
    ignore_case=True,
    boundary_max_length=3,
)
