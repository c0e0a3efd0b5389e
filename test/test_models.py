#!/usr/bin/env python3
import json
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from app.errors import DecodeError, SerializeError
from app.models import Alert, Buttons, ChatMessage, Card, Section, TextButton, KeyValue
from app.utils import dump_json_body, format_float, load_json_body


class TestAlertDecode(unittest.TestCase):
    def test_full_payload(self):
        alert = Alert.from_dict({
            "dashboardId": 1, "orgId": 3, "panelID": 2, "ruleID": 7,
            "evalMatches": [{"value": 1, "metric": "Count", "tags": {}}],
            "imageUrl": "img", "message": "msg", "ruleName": "rule", "ruleUrl": "url",
            "state": "alerting", "tags": {"env": "prod"}, "title": "title",
        })
        self.assertEqual((alert.dashboard_id, alert.org_id, alert.panel_id, alert.rule_id), (1, 3, 2, 7))
        self.assertEqual(alert.eval_matches, [{"value": 1, "metric": "Count", "tags": {}}])
        self.assertEqual(alert.tags, {"env": "prod"})
        self.assertEqual(alert.title, "title")

    def test_grafana_casing_for_panel_and_rule_ids(self):
        alert = Alert.from_dict({"panelId": 2, "ruleId": 9})
        self.assertEqual((alert.panel_id, alert.rule_id), (2, 9))

    def test_exact_key_wins_over_case_insensitive_match(self):
        alert = Alert.from_dict({"panelId": 2, "panelID": 5})
        self.assertEqual(alert.panel_id, 5)

    def test_missing_null_and_unknown_fields(self):
        alert = Alert.from_dict({"title": None, "extra": [1, 2], "evalMatches": None})
        self.assertEqual(alert, Alert())

    def test_null_body_decodes_to_empty_alert(self):
        self.assertEqual(Alert.from_dict(None), Alert())

    def test_null_eval_match_entry(self):
        self.assertEqual(Alert.from_dict({"evalMatches": [None]}).eval_matches, [{}])

    def test_type_errors(self):
        bad_payloads = [
            [],
            "alert",
            {"dashboardId": "1"},
            {"orgId": 1.5},
            {"panelID": True},
            {"ruleID": 2 ** 63},
            {"title": 10},
            {"evalMatches": {"value": 1}},
            {"evalMatches": [1]},
            {"tags": ["a"]},
            {"tags": {"a": 1}},
        ]
        for payload in bad_payloads:
            with self.subTest(payload=payload):
                with self.assertRaises(DecodeError):
                    Alert.from_dict(payload)


class TestJsonBody(unittest.TestCase):
    def test_malformed(self):
        for raw in (b'', b'   ', b'{', b'{"a": NaN}'):
            with self.subTest(raw=raw):
                with self.assertRaises(DecodeError):
                    load_json_body(raw)

    def test_numbers_out_of_float_range(self):
        huge_int = ('{"evalMatches": [{"value": 1' + '0' * 400 + ', "metric": "m"}]}').encode()
        for raw in (huge_int, b'{"value": 1e400}', b'{"value": -1e400}', b'[-1' + b'0' * 400 + b']'):
            with self.subTest(raw=raw[:40]):
                with self.assertRaises(DecodeError):
                    load_json_body(raw)

    def test_large_but_representable_numbers(self):
        self.assertEqual(load_json_body(b'{"value": 1e308}'), {"value": 1e308})
        self.assertEqual(load_json_body(b'{"id": 9223372036854775807}'), {"id": 2 ** 63 - 1})

    def test_valid(self):
        self.assertEqual(load_json_body(b'{"title": "x"}'), {"title": "x"})

    def test_dump_is_utf8_compact(self):
        self.assertEqual(dump_json_body({"text": "ação"}), '{"text":"ação"}'.encode('utf-8'))

    def test_dump_failure(self):
        with self.assertRaises(SerializeError):
            dump_json_body({"value": object()})
        with self.assertRaises(SerializeError):
            dump_json_body({"value": float('nan')})


class TestFormatFloat(unittest.TestCase):
    def test_numbers(self):
        self.assertEqual(format_float(1), '1.000000')
        self.assertEqual(format_float(16.002551672152055), '16.002552')
        self.assertEqual(format_float(1e21), '1000000000000000000000.000000')

    def test_non_numbers(self):
        self.assertEqual(format_float(None), '')
        self.assertEqual(format_float('n/a'), 'n/a')
        self.assertEqual(format_float(True), 'True')


class TestWidgetSerialization(unittest.TestCase):
    def test_message_to_dict(self):
        message = ChatMessage(
            text='<users/all>',
            cards=[Card(sections=[Section(widgets=[
                Buttons(buttons=(TextButton(text='URL', url='http://x'),)),
                KeyValue(top_label='State', content='ok'),
            ])])],
        )
        self.assertEqual(json.loads(json.dumps(message.to_dict())), {
            'text': '<users/all>',
            'cards': [{'sections': [{'widgets': [
                {'buttons': [{'textButton': {'text': 'URL', 'onClick': {'openLink': {'url': 'http://x'}}}}]},
                {'keyValue': {'topLabel': 'State', 'content': 'ok', 'contentMultiline': True}},
            ]}]}],
        })


if __name__ == '__main__':
    unittest.main()
