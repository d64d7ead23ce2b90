from book_connect.components.active_book import blur_markup

def test_plain_cover_url_is_unchanged():
    assert blur_markup("https://covers.example/b/id/1-L.jpg") == (
        '<div class="bc-blur" style="background-image:url(\'https://covers.example/b/id/1-L.jpg\')"></div>'
    )

def test_quotes_cannot_escape_css_url():
    markup = blur_markup("https://img.example/it's a (cover).jpg?w=1&h=2")
    assert "url('https://img.example/it%27s%20a%20%28cover%29.jpg?w=1&amp;h=2')" in markup
    assert markup.count("'") == 2
    assert '"' not in markup.split('style="', 1)[1].rsplit('"', 1)[0]
