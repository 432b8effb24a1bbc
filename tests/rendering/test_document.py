"""
Tests for rendering.document

Test Coverage:
- render_forms(): slides not marked as forms are untouched
- render_form_document(): tools div, form wrapper, paragraph substitution
- Error policy: lenient keeps other fields, strict returns input unchanged
"""
from bs4 import BeautifulSoup

from formspec_toolkit.config import DocumentConfig, FormConfig
from formspec_toolkit.diagnostics import DiagnosticsCollector
from formspec_toolkit.rendering.document import render_form_document, render_forms

SLIDE = (
    "<h1>Quick survey</h1>"
    "<p>Tell us about yourself.</p>"
    "<p>name -> Your name *= ___[30]</p>"
    "<p>city -> Home town = {BOS, (NYC), SFO}</p>"
)


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


class TestRenderForms:

    def test_render_forms_when_no_form_title_then_unchanged(self):
        assert render_forms(SLIDE) == SLIDE
        assert render_forms(SLIDE, form="") == SLIDE

    def test_render_forms_when_title_then_rendered(self):
        soup = _soup(render_forms(SLIDE, form="survey"))

        assert soup.find("form", id="survey") is not None


class TestRenderFormDocument:

    def test_document_when_rendered_then_form_wraps_content(self):
        soup = _soup(render_form_document(SLIDE, "survey"))

        form = soup.find("form")
        assert form["id"] == "survey"
        assert form["action"] == "form/survey"
        assert form["method"] == "POST"
        assert form["class"] == ["tools"]
        assert [child.name for child in soup.contents] == ["form"]
        assert form.find("h1").get_text() == "Quick survey"

    def test_document_when_rendered_then_tools_inside_form(self):
        soup = _soup(render_form_document(SLIDE, "survey"))

        tools = soup.find("form").find("div", class_="tools")
        display = tools.find("input", class_="display")
        save = tools.find("input", class_="save")
        assert display["type"] == "button"
        assert display["value"] == "forms.display"
        assert save["type"] == "submit"
        assert save["value"] == "forms.save"
        assert save.has_attr("disabled")

    def test_document_when_custom_labels_then_used(self):
        config = FormConfig(document=DocumentConfig(display_label="Show", save_label="Send", action_prefix="/answers/"))

        soup = _soup(render_form_document(SLIDE, "survey", config))

        assert soup.find("input", class_="display")["value"] == "Show"
        assert soup.find("input", class_="save")["value"] == "Send"
        assert soup.find("form")["action"] == "/answers/survey"

    def test_document_when_field_paragraphs_then_replaced(self):
        soup = _soup(render_form_document(SLIDE, "survey"))

        paragraphs = [p.get_text() for p in soup.find_all("p")]
        assert paragraphs == ["Tell us about yourself."]

        name = soup.find("div", id="survey_name")
        assert name["data-name"] == "name"
        assert "required" in name["class"]
        assert name.find("input")["size"] == "30"

        city = soup.find("select", id="survey_city_response")
        options = city.find_all("option")
        assert [o["value"] for o in options] == ["", "BOS", "NYC", "SFO"]
        assert options[2].has_attr("selected")

    def test_document_when_fields_rendered_then_document_order_kept(self):
        soup = _soup(render_form_document(SLIDE, "survey"))

        ids = [div["id"] for div in soup.find_all("div", class_="element")]
        assert ids == ["survey_name", "survey_city"]

    def test_document_when_multiline_paragraph_then_body_used(self):
        slide = "<p>city = {\n   (NYC -> New York City)\n   [SFO -> San Francisco]\n}</p>"

        soup = _soup(render_form_document(slide, "survey"))

        options = soup.find("select").find_all("option")
        assert [o.get_text() for o in options] == ["----", "New York City", "San Francisco"]
        assert options[2]["class"] == ["correct"]


class TestErrorPolicy:

    SLIDE_WITH_ERROR = (
        "<p>first = ___</p>"
        "<p>broken = (x) A () A</p>"
        "<p>last = [ ]</p>"
    )

    def test_policy_when_lenient_then_other_fields_rendered(self):
        collector = DiagnosticsCollector()

        soup = _soup(render_form_document(self.SLIDE_WITH_ERROR, "quiz", diagnostics=collector))

        assert soup.find("div", id="quiz_first") is not None
        assert soup.find("div", id="quiz_last") is not None
        assert [p.get_text() for p in soup.find_all("p")] == ["broken = (x) A () A"]
        assert collector.summary() == {"malformed_spec": 1}

    def test_policy_when_strict_then_input_returned_unchanged(self, strict_config):
        html = render_form_document(self.SLIDE_WITH_ERROR, "quiz", strict_config)

        assert html == self.SLIDE_WITH_ERROR

    def test_policy_when_count_too_long_then_paragraph_kept(self):
        slide = "<p>first = ___</p><p>q = ___[" + "5" * 5000 + "]</p>"

        soup = _soup(render_form_document(slide, "quiz"))

        assert soup.find("div", id="quiz_first") is not None
        assert soup.find("div", id="quiz_q") is None
        assert len(soup.find_all("p")) == 1

    def test_policy_when_count_too_long_and_strict_then_input_unchanged(self, strict_config):
        slide = "<p>q = [" + "9" * 5000 + "]</p>"

        assert render_form_document(slide, "quiz", strict_config) == slide

    def test_policy_when_unmatched_then_label_survives(self):
        soup = _soup(render_form_document("<p>q -> Huh? = ???</p>", "quiz"))

        field = soup.find("div", id="quiz_q")
        assert field.find("label").get_text() == "Huh?"
        assert field.find("input") is None
