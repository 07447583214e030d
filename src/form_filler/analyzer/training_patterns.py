"""
ヒューリスティック分類用の学習パターン表

実フォームから抽出した語彙と信頼度重み（0〜1）。context_keywords は
ラベルやグループ見出しなど周辺テキストに現れると加点される語。
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class TrainingPattern:
    type: str
    patterns: Tuple[str, ...]
    weight: float
    context_keywords: Tuple[str, ...] = ()


TRAINING_PATTERNS: List[TrainingPattern] = [
    TrainingPattern(
        'email',
        ('email', 'mail', 'e-mail', 'eml', 'emailaddress', 'email_address', 'correo', 'correio',
         'electronico'),
        0.95,
        ('contact', 'account', 'login', 'register', 'subscribe'),
    ),
    TrainingPattern(
        'phone',
        ('phone', 'tel', 'mobile', 'cell', 'telefon', 'telefono', 'telephone', 'fax', 'whatsapp',
         'contact_number', 'contactnumber'),
        0.94,
        ('contact', 'call', 'sms', 'number'),
    ),
    TrainingPattern(
        'first_name',
        ('firstname', 'first_name', 'fname', 'givenname', 'given_name', 'first', 'nombre', 'prenom'),
        0.93,
        ('personal', 'profile', 'user', 'customer', 'given'),
    ),
    TrainingPattern(
        'last_name',
        ('lastname', 'last_name', 'lname', 'surname', 'family_name', 'familyname', 'last',
         'apellido', 'nom', 'family'),
        0.93,
        ('personal', 'profile', 'user', 'customer', 'family', 'sur'),
    ),
    TrainingPattern(
        'name',
        ('name', 'fullname', 'full_name', 'displayname', 'display_name'),
        0.8,
        ('your', 'enter', 'please', 'full'),
    ),
    TrainingPattern(
        'address',
        ('address', 'street', 'addr', 'streetaddress', 'street_address', 'direccion', 'adresse',
         'line1', 'line2'),
        0.91,
        ('shipping', 'billing', 'home', 'delivery'),
    ),
    TrainingPattern(
        'city',
        ('city', 'town', 'locality', 'ciudad', 'ville', 'stadt', 'municipality'),
        0.91,
        ('address', 'location', 'shipping', 'billing'),
    ),
    TrainingPattern(
        'state',
        ('state', 'province', 'region', 'prefecture', 'estado', 'provincia'),
        0.88,
        ('address', 'location'),
    ),
    TrainingPattern(
        'zip',
        ('zip', 'zipcode', 'postal', 'postcode', 'postalcode', 'postal_code', 'plz', 'cp',
         'postleitzahl'),
        0.92,
        ('code', 'address'),
    ),
    TrainingPattern(
        'country',
        ('country', 'nationality', 'nation', 'pais', 'pays', 'land', 'countryname'),
        0.91,
        ('select', 'choose', 'location'),
    ),
    TrainingPattern(
        'password',
        ('password', 'passwd', 'pwd', 'pass', 'contrasena', 'motdepasse'),
        0.98,
        ('login', 'security', 'confirm', 'new', 'current'),
    ),
    TrainingPattern(
        'username',
        ('username', 'user_name', 'login', 'userid', 'user_id', 'loginid', 'usuario', 'user',
         'account', 'accountname'),
        0.95,
        ('account', 'sign', 'login', 'unique'),
    ),
    TrainingPattern(
        'company',
        ('company', 'organization', 'org', 'business', 'employer', 'empresa', 'societe',
         'companyname', 'firm'),
        0.88,
        ('work', 'professional', 'employment'),
    ),
    TrainingPattern(
        'job_title',
        ('jobtitle', 'job_title', 'position', 'role', 'occupation', 'cargo', 'poste',
         'jobposition', 'profession', 'designation'),
        0.86,
        ('work', 'professional', 'current', 'employment', 'job', 'career'),
    ),
    TrainingPattern(
        'url',
        ('url', 'website', 'site', 'webpage', 'web', 'link', 'sitio'),
        0.89,
        ('http', 'www', 'domain'),
    ),
    TrainingPattern(
        'birthdate',
        ('dob', 'birthdate', 'birthday', 'birth_date', 'dateofbirth', 'date_of_birth', 'bdate',
         'born', '生年月日', '出生日期', '생년월일'),
        0.94,
        ('birth', 'born', 'age'),
    ),
    TrainingPattern(
        'date',
        ('date', 'fecha', 'datum', 'datepicker'),
        0.85,
        ('select', 'pick', 'choose'),
    ),
    TrainingPattern(
        'number',
        ('age', 'quantity', 'qty', 'amount', 'count', 'number', 'num', 'cantidad'),
        0.8,
        ('enter', 'input'),
    ),
    TrainingPattern(
        'color',
        ('color', 'colour', 'rgb', 'hex', 'shade', 'paint'),
        0.87,
        ('pick', 'select', 'choose'),
    ),
    # 汎用テキスト（重み低・フォールバック用）
    TrainingPattern(
        'text',
        ('text', 'input', 'field', 'value', 'message', 'comment', 'notes', 'description'),
        0.5,
        ('enter', 'type', 'write'),
    ),
]
