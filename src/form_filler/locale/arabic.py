"""アラビア語キーワード辞書"""

from ..analyzer.text_utils import has_arabic
from .keyword_dictionary import KeywordDictionary

ARABIC_KEYWORDS = [
    ('تأكيد كلمة المرور', 'password'),
    ('إعادة كلمة المرور', 'password'),
    ('البريد الإلكتروني', 'email'),
    ('رقم الهاتف المحمول', 'phone'),
    ('تاريخ الميلاد', 'birthday'),
    ('الرمز البريدي', 'zipcode'),
    ('صندوق البريد', 'po_box'),
    ('اسم المستخدم', 'username'),
    ('رقم الهوية', 'id_card'),
    ('رقم البطاقة', 'credit_card'),
    ('اسم العائلة', 'lastname'),
    ('الاسم الأول', 'firstname'),
    ('رقم الهاتف', 'phone'),
    ('كلمة السر', 'password'),
    ('كلمة المرور', 'password'),
    ('عنوان البريد', 'email'),
    ('اسم الشركة', 'company'),
    ('المحافظة', 'state'),
    ('المنطقة', 'state'),
    ('المدينة', 'city'),
    ('العنوان', 'address'),
    ('الشارع', 'address'),
    ('الدولة', 'country'),
    ('الجنس', 'sex'),
    ('العمر', 'age'),
    ('الموقع الإلكتروني', 'url'),
    ('رابط الموقع', 'url'),
    ('الوظيفة', 'job_title'),
    ('المسمى الوظيفي', 'job_title'),
    ('القسم', 'department'),
    ('ملاحظات', 'description'),
    ('رسالة', 'description'),
    ('بحث', 'search'),
    ('السعر', 'price'),
    ('الكمية', 'number'),
    ('هاتف', 'phone'),
    ('جوال', 'phone'),
    ('ايميل', 'email'),
    ('بريد', 'email'),
    ('اسم', 'name'),
    ('لقب', 'lastname'),
    ('ذكر', 'sex'),
    ('أنثى', 'sex'),
    ('فاكس', 'phone'),
]

ARABIC = KeywordDictionary(language='ar', entries=ARABIC_KEYWORDS, detector=has_arabic)
