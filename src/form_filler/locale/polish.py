"""ポーランド語キーワード辞書"""

from .keyword_dictionary import KeywordDictionary

POLISH_KEYWORDS = [
    ('potwierdź hasło', 'password'),
    ('powtórz hasło', 'password'),
    ('data urodzenia', 'birthday'),
    ('numer telefonu', 'phone'),
    ('kod pocztowy', 'zipcode'),
    ('nazwa użytkownika', 'username'),
    ('nazwa firmy', 'company'),
    ('numer karty', 'credit_card'),
    ('właściciel karty', 'account_name'),
    ('kod bezpieczeństwa', 'credit_card_cvv'),
    ('data ważności', 'date'),
    ('hasło', 'password'),
    ('nazwisko', 'lastname'),
    ('imię', 'firstname'),
    ('telefon', 'phone'),
    ('komórka', 'phone'),
    ('adres e-mail', 'email'),
    ('adres', 'address'),
    ('miasto', 'city'),
    ('miejscowość', 'city'),
    ('województwo', 'state'),
    ('region', 'state'),
    ('kraj', 'country'),
    ('płeć', 'sex'),
    ('wiek', 'age'),
    ('strona internetowa', 'url'),
    ('strona www', 'url'),
    ('zawód', 'job_title'),
    ('stanowisko', 'job_title'),
    ('firma', 'company'),
    ('dział', 'department'),
    ('wiadomość', 'description'),
    ('komentarz', 'description'),
    ('szukaj', 'search'),
    ('cena', 'price'),
    ('ilość', 'number'),
    ('liczba', 'number'),
    ('ulica', 'address'),
    # 'random' の 'dom' を置換しないよう語境界付き
    ('dom', 'building'),
    ('lokal', 'room_number'),
    ('fax', 'phone'),
    # 納税者番号は会社欄に付随することが多い
    ('nip', 'company'),
]

POLISH = KeywordDictionary(
    language='pl',
    entries=POLISH_KEYWORDS,
    ignore_case=True,
    boundary_max_length=3,
)
