"""スペイン語キーワード辞書"""

from .keyword_dictionary import KeywordDictionary

SPANISH_KEYWORDS = [
    ('confirmar contraseña', 'password'),
    ('correo electrónico', 'email'),
    ('dirección de correo', 'email'),
    ('fecha de nacimiento', 'birthday'),
    ('número de teléfono', 'phone'),
    ('código postal', 'zipcode'),
    ('nombre de usuario', 'username'),
    ('nombre de la empresa', 'company'),
    ('número de tarjeta', 'credit_card'),
    ('titular de la tarjeta', 'account_name'),
    ('código de seguridad', 'credit_card_cvv'),
    ('fecha de vencimiento', 'credit_card_expiry'),
    ('fecha de caducidad', 'credit_card_expiry'),
    ('número de cuenta', 'account_number'),
    ('sitio web', 'url'),
    ('página web', 'url'),
    ('contraseña', 'password'),
    ('apellidos', 'lastname'),
    ('apellido', 'lastname'),
    ('nombre', 'firstname'),
    ('teléfono', 'phone'),
    ('celular', 'phone'),
    ('móvil', 'phone'),
    ('dirección', 'address'),
    ('domicilio', 'address'),
    ('calle', 'address'),
    ('ciudad', 'city'),
    ('población', 'city'),
    ('municipio', 'city'),
    ('provincia', 'state'),
    ('estado', 'state'),
    ('región', 'state'),
    ('país', 'country'),
    ('género', 'sex'),
    ('sexo', 'sex'),
    ('edad', 'age'),
    ('profesión', 'job_title'),
    ('cargo', 'job_title'),
    ('empresa', 'company'),
    ('compañía', 'company'),
    ('departamento', 'department'),
    ('comentarios', 'description'),
    ('mensaje', 'description'),
    ('descripción', 'description'),
    ('buscar', 'search'),
    ('precio', 'price'),
    ('cantidad', 'number'),
    ('fax', 'phone'),
    ('cp', 'zipcode'),
]

SPANISH = KeywordDictionary(
    language='es',
    entries=SPANISH_KEYWORDS,
    ignore_case=True,
    boundary_max_length=3,
)
