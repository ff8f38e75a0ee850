from marketing import content


def test_privacy_renders(get_page):
    response, soup = get_page("/privacy/")
    assert response.status_code == 200
    assert soup.title.string == "Privacy Policy | SnapPlay"
    assert soup.h1.get_text(strip=True) == "Privacy Policy"


def test_six_sections_in_order(get_page):
    _, soup = get_page("/privacy/")
    headings = [s.h2.get_text(strip=True) for s in soup.select("section.policy-section")]
    assert headings == [
        "1. Introduction",
        "2. Information Collection",
        "3. Use of Information",
        "4. Third-Party Services",
        "5. Data Retention",
        "6. Contact Us",
    ]


def test_contact_section_has_support_email(get_page):
    _, soup = get_page("/privacy/")
    last = soup.select("section.policy-section")[-1]
    assert last.h2.get_text(strip=True).endswith("Contact Us")
    assert "support@sarankar.com" in last.get_text()


def test_third_party_services(get_page):
    _, soup = get_page("/privacy/")
    links = soup.select(".third-party a")
    assert [a.get_text(strip=True) for a in links] == ["Google Play Services", "AdMob"]
    assert [a["href"] for a in links] == [
        "https://policies.google.com/privacy",
        "https://support.google.com/admob/answer/6128543?hl=en",
    ]
    for a in links:
        assert a["target"] == "_blank"
        assert a["rel"] == ["noopener", "noreferrer"]


def test_use_of_information_bullets(get_page):
    _, soup = get_page("/privacy/")
    section = soup.select("section.policy-section")[2]
    items = [li.get_text(strip=True) for li in section.select("ul.bullets li")]
    assert len(items) == 4
    assert "Show relevant advertisements via Google AdMob." in items


def test_introduction_markup_is_rendered(get_page):
    _, soup = get_page("/privacy/")
    intro = soup.select("section.policy-section")[0]
    assert [s.get_text() for s in intro.find_all("strong")] == ["SnapPlay", "Amozea"]


def test_last_updated_footer(get_page):
    _, soup = get_page("/privacy/")
    footer = soup.select_one(".policy-footer")
    assert footer.get_text(" ", strip=True) == "Last updated: February 16, 2026"


def test_render_is_idempotent(client):
    assert client.get("/privacy/").content == client.get("/privacy/").content


def test_policy_sections_declared_once():
    assert len(content.POLICY_SECTIONS) == 6
    assert content.POLICY_SECTIONS[3].links == content.THIRD_PARTY_SERVICES
    assert content.POLICY_SECTIONS[-1].contact == content.SUPPORT_EMAIL
