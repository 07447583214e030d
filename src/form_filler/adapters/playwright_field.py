"""
Playwright の Locator から FormField を組み立てるアダプタ

1回の evaluate で属性・ラベル・近傍テキスト（矩形と可視性付き）・
fieldset 見出し・前後の入力欄・option 一覧をまとめて取得する。
"""

import asyncio
import logging

from playwright.async_api import Locator

from ..analyzer.field_model import FormField

logger = logging.getLogger(__name__)

DEFAULT_EVALUATE_TIMEOUT_MS = 5000

FIELD_SNAPSHOT_SCRIPT = """
el => {
    const MAX_DEPTH = 5;
    const LABEL_TAGS = new Set(['label', 'span', 'div', 'p', 'td', 'th', 'legend', 'dt',
        'strong', 'em', 'b', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6']);
    const clean = t => (t || '').replace(/\\s+/g, ' ').trim();
    const rectOf = node => {
        const r = node.getBoundingClientRect();
        return { x: r.x, y: r.y, width: r.width, height: r.height };
    };
    const isVisible = node => {
        const s = window.getComputedStyle(node);
        return s.display !== 'none' && s.visibility !== 'hidden' && node.offsetParent !== null;
    };
    const textOfIds = ids => (ids || '').split(/\\s+/).filter(Boolean)
        .map(id => document.getElementById(id))
        .filter(Boolean)
        .map(n => clean(n.innerText || n.textContent))
        .join(' ');

    const tag = el.tagName.toLowerCase();
    // el.type は未知の type 値をブラウザが 'text' にそろえた値
    const kind = tag === 'input' ? (el.type || 'text').toLowerCase() : tag;

    const attributes = {};
    for (const attr of el.attributes) attributes[attr.name.toLowerCase()] = attr.value;

    const labels = el.labels ? Array.from(el.labels).map(l => clean(l.innerText || l.textContent)) : [];

    const ancestors = [];
    let cur = el.parentElement;
    while (cur && ancestors.length < MAX_DEPTH) { ancestors.push(cur); cur = cur.parentElement; }
    const seen = new Set(ancestors);
    const nearby = [];
    ancestors.forEach((ancestor, depth) => {
        for (const node of ancestor.querySelectorAll('*')) {
            if (node === el || seen.has(node)) continue;
            seen.add(node);
            const name = node.tagName.toLowerCase();
            if (!LABEL_TAGS.has(name)) continue;
            const text = clean(node.innerText || node.textContent);
            if (!text) continue;
            nearby.push({ text, tag: name, rect: rectOf(node), visible: isVisible(node),
                child_count: node.children.length, depth });
        }
    });

    const groups = [];
    ancestors.slice(0, 3).forEach(ancestor => {
        if (ancestor.tagName.toLowerCase() === 'fieldset') {
            const legend = ancestor.querySelector('legend');
            if (legend) groups.push(clean(legend.innerText || legend.textContent));
        } else if (ancestor.getAttribute('role') === 'group' && ancestor.getAttribute('aria-label')) {
            groups.push(clean(ancestor.getAttribute('aria-label')));
        }
    });

    const scope = el.closest('form') || document;
    const inputs = Array.from(scope.querySelectorAll('input')).filter(i =>
        ['', 'text', 'search', 'email', 'tel'].includes((i.getAttribute('type') || '').toLowerCase()));
    const index = inputs.indexOf(el);
    const ident = i => (i && (i.getAttribute('name') || i.id)) || '';

    const options = tag === 'select'
        ? Array.from(el.options).map(o => ({ value: o.value, text: clean(o.text), disabled: o.disabled }))
        : [];

    return {
        kind,
        name: el.getAttribute('name') || '',
        element_id: el.id || '',
        placeholder: el.getAttribute('placeholder') || '',
        aria_label: el.getAttribute('aria-label') || '',
        title: el.getAttribute('title') || '',
        class_list: Array.from(el.classList),
        attributes,
        labels,
        aria_labelledby_text: textOfIds(el.getAttribute('aria-labelledby')),
        aria_describedby_text: textOfIds(el.getAttribute('aria-describedby')),
        pattern: el.getAttribute('pattern') || '',
        max_length: el.maxLength > 0 ? el.maxLength : 0,
        required: el.required || el.getAttribute('aria-required') === 'true',
        direction: window.getComputedStyle(el).direction || 'ltr',
        options,
        rect: rectOf(el),
        nearby_texts: nearby,
        group_texts: groups,
        previous_field: index > 0 ? ident(inputs[index - 1]) : '',
        next_field: index >= 0 && index + 1 < inputs.length ? ident(inputs[index + 1]) : '',
    };
}
"""


async def extract_form_field(locator: Locator, key: str = '',
                             timeout_ms: int = DEFAULT_EVALUATE_TIMEOUT_MS) -> FormField:
    """Locator が指す要素1つのスナップショットを取り、FormField を返す"""
    try:
        data = await asyncio.wait_for(locator.evaluate(FIELD_SNAPSHOT_SCRIPT), timeout=timeout_ms / 1000)
    except asyncio.TimeoutError:
        logger.warning(f"Field snapshot timed out after {timeout_ms}ms")
        raise
    if not isinstance(data, dict):
        raise ValueError(f"Unexpected field snapshot: {type(data).__name__}")
    data['key'] = key
    return FormField.from_dict(data)
