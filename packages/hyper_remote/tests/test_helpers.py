"""Test links and buttons that run JavaScript or remote requests."""

from markupsafe import Markup

from hyper_remote import (
    build_click_handler,
    button_to_function,
    button_to_remote,
    link_to_function,
    link_to_remote,
    submit_to_remote,
)


class TestClickHandler:
    """Test the onclick body built for links."""

    def test_function_then_return_false(self):
        """The body is followed by a default-action suppression."""
        assert build_click_handler(None, "alert('Hello world!')") == "alert('Hello world!'); return false;"

    def test_existing_handler_runs_first(self):
        """An existing handler is kept in front of the body."""
        assert build_click_handler("track()", "go()") == "track(); go(); return false;"

    def test_empty_body(self):
        """A missing body still cancels the click."""
        assert build_click_handler(None, None) == "; return false;"


class TestLinkToFunction:
    """Test links running arbitrary JavaScript."""

    def test_basic_link(self):
        """href defaults to # and the onclick is attribute-escaped."""
        result = link_to_function("Greeting", "alert('Hello world!')")

        assert isinstance(result, Markup)
        assert result == (
            '<a href="#" onclick="alert(&#39;Hello world!&#39;); return false;">Greeting</a>'
        )

    def test_link_text_is_escaped(self):
        """Plain link text is escaped, Markup is trusted."""
        assert ">Fish &amp; Chips</a>" in link_to_function("Fish & Chips", "go()")
        assert "><b>Bold</b></a>" in link_to_function(Markup("<b>Bold</b>"), "go()")

    def test_html_options(self):
        """Extra attributes, href and onclick are honoured."""
        result = link_to_function("More", "show()", {
            "id": "more_link",
            "href": "/details",
            "onclick": "track()",
        })

        assert result == (
            '<a href="/details" id="more_link" onclick="track(); show(); return false;">More</a>'
        )


class TestButtonToFunction:
    """Test button inputs running arbitrary JavaScript."""

    def test_basic_button(self):
        """The button gets type, value and onclick."""
        result = button_to_function("Greeting", "alert('Hello world!')")

        assert result == (
            '<input type="button" value="Greeting" onclick="alert(&#39;Hello world!&#39;);" />'
        )

    def test_existing_onclick(self):
        """An existing onclick runs first."""
        result = button_to_function("Go", "go()", {"onclick": "track()", "class": "btn"})

        assert 'class="btn"' in result
        assert 'onclick="track(); go();"' in result

    def test_type_and_value_cannot_be_overridden(self):
        """The input stays a plain button labelled with name."""
        result = button_to_function("Go", "go()", {"type": "submit", "value": "Other", "id": "go"})

        assert result == '<input id="go" type="button" value="Go" onclick="go();" />'

    def test_remote_button_never_submits(self):
        """A remote button cannot become a submit input through html options."""
        result = button_to_remote("Save", {"url": "/save", "html": {"type": "submit"}})

        assert 'type="submit"' not in result
        assert 'type="button"' in result


class TestRemoteLinks:
    """Test links and buttons wrapping request expressions."""

    def test_link_to_remote(self):
        """The request expression becomes the click handler."""
        result = link_to_remote("Delete this post", {"url": "/posts/3", "update": "posts", "with": "null"})

        assert result == (
            '<a href="#" onclick="new Ajax.Updater(&#39;posts&#39;, &#39;/posts/3&#39;, '
            '{asynchronous:true, evalScripts:true, parameters:null}); return false;">'
            'Delete this post</a>'
        )

    def test_link_to_remote_html_option(self):
        """options['html'] supplies attributes when html_options is not given."""
        result = link_to_remote("Delete", {"url": "/posts/3", "html": {"class": "destructive"}})

        assert 'class="destructive"' in result

    def test_link_to_remote_fallback_href(self):
        """An explicit href keeps the link usable without JavaScript."""
        result = link_to_remote("Delete", {"url": "/posts/3"}, {"href": "/posts/3/delete"})

        assert result.startswith('<a href="/posts/3/delete" onclick="new Ajax.Request(')

    def test_button_to_remote(self):
        """Buttons wrap the request without returning false."""
        result = button_to_remote("Refresh", {"url": "/emails", "update": "emails", "with": "null"})

        assert result == (
            '<input type="button" value="Refresh" onclick="new Ajax.Updater(&#39;emails&#39;, '
            '&#39;/emails&#39;, {asynchronous:true, evalScripts:true, parameters:null});" />'
        )

    def test_submit_to_remote(self):
        """The button is named and serializes its form."""
        result = submit_to_remote("create_btn", "Create", {"url": "/testing/create"})

        assert result == (
            '<input name="create_btn" type="button" value="Create" '
            'onclick="new Ajax.Request(&#39;/testing/create&#39;, {asynchronous:true, '
            'evalScripts:true, parameters:Form.serialize(this.form)});" />'
        )

    def test_submit_to_remote_keeps_with_and_html(self):
        """An explicit with and html attributes are kept."""
        result = submit_to_remote("update_btn", "Update", {
            "url": "/testing/update",
            "update": {"success": "succeed", "failure": "fail"},
            "with": "extra()",
            "html": {"class": "primary"},
        })

        assert 'class="primary"' in result
        assert 'name="update_btn"' in result
        assert "{success:&#39;succeed&#39;,failure:&#39;fail&#39;}" in result
        assert "parameters:extra()" in result
