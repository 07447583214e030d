"""フランス語キーワード辞書"""

from .keyword_dictionary import KeywordDictionary

FRENCH_KEYWORDS = [
    ('confirmer le mot de passe', 'password'),
    ('mot de passe', 'password'),
    ('date de naissance', 'birthday'),
    ('numéro de téléphone', 'phone'),
    ('code postal', 'zipcode'),
    ("nom d'utilisateur", 'username'),
    ("nom de l'entreprise", 'company'),
    ('numéro de carte', 'credit_card'),
    ('titulaire de la carte', 'account_name'),
    ('code de sécurité', 'credit_card_cvv'),
    ("date d'expiration", 'credit_card_expiry'),
    ('date de validité', 'credit_card_expiry'),
    ('adresse e-mail', 'email'),
    ('adresse électronique', 'email'),
    ('site internet', 'url'),
    ('numéro de compte', 'account_number'),
    ('courriel', 'email'),
    ('prénom', 'firstname'),
    ('nom de famille', 'lastname'),
    ('téléphone', 'phone'),
    ('portable', 'phone'),
    ('mobile', 'phone'),
    ('adresse', 'address'),
    ('ville', 'city'),
    ('région', 'state'),
    ('province', 'state'),
    ('pays', 'country'),
    ('sexe', 'sex'),
    ('genre', 'sex'),
    ('âge', 'age'),
    ('site web', 'url'),
    ('profession', 'job_title'),
    ('fonction', 'job_title'),
    ('société', 'company'),
    ('entreprise', 'company'),
    ('département', 'department'),
    ('commentaire', 'description'),
    ('message', 'description'),
    ('description', 'description'),
    ('recherche', 'search'),
    ('prix', 'price'),
    ('quantité', 'number'),
    ('nom', 'lastname'),
    ('rue', 'address'),
    ('fax', 'phone'),
    ('cp', 'zipcode'),
]

FRENCH = KeywordDictionary(
    language='fr',
    entries=FRENCH_KEYWORDS,
    ignore_case=True,
    boundary_max_length=3,
)
