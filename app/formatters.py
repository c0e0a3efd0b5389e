from .constants import DANGER_COLOR, DANGER_PREFIX, HEALTH_COLOR, HEALTH_STATE, MENTION_ALL, WARN_COLOR
from .models import Buttons, Card, ChatMessage, Image, KeyValue, Section, TextButton, TextParagraph
from .utils import format_float, format_text


def resolve_mention(alert):
    mention = MENTION_ALL
    if alert.rule_name.startswith(DANGER_PREFIX):
        # Mesmo valor do caminho padrão; mantido até existir uma menção por severidade
        mention = MENTION_ALL
    return mention


def resolve_color(alert):
    color = WARN_COLOR
    if alert.rule_name.startswith(DANGER_PREFIX):
        color = DANGER_COLOR
    # Estado "ok" sempre vence o prefixo [DANGER]
    if alert.state == HEALTH_STATE:
        color = HEALTH_COLOR
    return color


def format_eval_detail(eval_matches):
    """Linha de detalhe das avaliações.

    Só a última avaliação aparece no card, e os rótulos ficam trocados
    (``metric:`` recebe o valor, ``value:`` recebe o nome da métrica), igual ao
    que os canais já recebem hoje.
    """
    text_detail = ""
    for match in eval_matches:
        text_detail = f"metric: {format_float(match.get('value'))}, value: {format_text(match.get('metric'))}\n"
    return text_detail


def format_alert_text(alert, color):
    return f'<font color="{color}">{alert.title}</font>\n{format_eval_detail(alert.eval_matches)}'


def build_chat_message(alert):
    color = resolve_color(alert)
    text = format_alert_text(alert, color)

    head_section = Section(widgets=[
        TextParagraph(text=text),
        Buttons(buttons=(TextButton(text="URL", url=alert.rule_url),)),
        Image(image_url=alert.image_url),
    ])
    detail_section = Section(widgets=[
        KeyValue(top_label="State", content=alert.state, content_multiline=True),
        KeyValue(top_label="Message", content=alert.message, content_multiline=True),
    ])

    return ChatMessage(
        text=resolve_mention(alert),
        cards=[Card(sections=[head_section, detail_section])],
    )
