"""HTML fragments for each part of the dictionary page.

Every function maps state to markup and nothing else; links carry the
page parameters needed to rebuild that state on the next request.
"""
from config import settings
from languages import DIFFICULTY_LEVELS, LANGUAGES, WORD_TYPES, get_language
from views.html import classes, esc, href

DIFFICULTY_CLASSES = {level: f"badge-{level.lower()}" for level in DIFFICULTY_LEVELS}


def render_suggestions(suggestions, language: str, visible: bool = True) -> str:
    if not visible or not suggestions:
        return ""
    parts = ["<div class='suggestions' role='listbox'>"]
    for s in suggestions:
        parts.append(f"<a class='suggestion' href='{href('/', q=s.word, lang=language)}'>")
        parts.append(f"<div class='suggestion-word'>{esc(s.word)}</div>")
        if s.translation:
            parts.append(f"<div class='suggestion-translation'>{esc(s.translation)}</div>")
        parts.append("</a>")
    parts.append("</div>")
    return "".join(parts)


# Debounced autocomplete: each keystroke cancels the pending timer; only the
# latest response is swapped into the slot.
SUGGEST_SCRIPT = (
    "<script>(function(field){"
    "var input=field.querySelector('input[name=q]'),"
    "slot=field.querySelector('.suggestions-slot'),"
    "lang=field.closest('form').querySelector('select[name=lang]'),"
    "delay=parseInt(input.dataset.debounce,10),timer=null,seq=0;"
    "function refresh(){clearTimeout(timer);var q=input.value;"
    "if(!q.trim()){seq++;slot.innerHTML='';return;}"
    "timer=setTimeout(function(){var mine=++seq;"
    "fetch(input.dataset.suggestUrl+'?q='+encodeURIComponent(q)+'&lang='+lang.value)"
    ".then(function(r){return r.ok?r.text():null;})"
    ".then(function(html){if(html!==null&&mine===seq){slot.innerHTML=html;}})"
    ".catch(function(e){console.error('Autocomplete error:',e);});},delay);}"
    "input.addEventListener('input',refresh);lang.addEventListener('change',refresh);"
    "})(document.currentScript.parentElement);</script>"
)


def render_search_box(search) -> str:
    parts = [
        "<form class='search' method='get' action='/'>",
        "<div class='search-field'>",
        f"<input type='text' name='q' value='{esc(search.query)}' placeholder='Search for a word...' "
        f"autocomplete='off' data-suggest-url='/views/suggestions' "
        f"data-debounce='{settings.AUTOCOMPLETE_DEBOUNCE_MS}'>",
        "<div class='suggestions-slot'>",
        render_suggestions(search.suggestions, search.language, search.suggestions_visible),
        "</div>",
        SUGGEST_SCRIPT,
        "</div>",
        "<select name='lang'>",
    ]
    for code, lang in LANGUAGES.items():
        selected = " selected" if code == search.language else ""
        parts.append(f"<option value='{code}'{selected}>{esc(lang['name'])}</option>")
    parts.append("</select>")
    disabled = " disabled" if search.loading else ""
    label = "Searching..." if search.loading else "Search"
    parts.append(f"<button type='submit'{disabled}>{label}</button>")
    if search.error:
        parts.append(f"<p class='error'>{esc(search.error)}</p>")
    parts.append("</form>")
    return "".join(parts)


def render_word_card(entry, active_tab: int = 0, **params) -> str:
    if not 0 <= active_tab < len(entry.translations):
        active_tab = 0
    pronounce = href("/views/pronounce", word=entry.word, lang=entry.language)
    parts = [
        "<article class='word-card'>",
        "<header>",
        f"<h2>{esc(entry.word)}</h2>",
        f"<span class='{classes('badge', DIFFICULTY_CLASSES.get(entry.difficulty))}'>"
        f"{esc(entry.difficulty)}</span>",
        f"<a class='pronounce' href='{pronounce}' title='Listen to pronunciation'>&#128264;</a>",
        "</header>",
    ]

    if entry.translations:
        parts.append("<nav class='tabs'>")
        for i, t in enumerate(entry.translations):
            link = href("/", **{**params, "tab": i})
            cls = classes("tab", "active" if i == active_tab else "")
            parts.append(f"<a class='{cls}' href='{link}'>{esc(t.type)}</a>")
        parts.append("</nav>")

        t = entry.translations[active_tab]
        parts.append("<section class='translation'>")
        parts.append(f"<h3>{esc(t.word)} <span class='word-type'>{esc(t.type)}</span></h3>")
        parts.append("<h4>Definitions</h4><ol>")
        for definition in t.definitions:
            parts.append(f"<li>{esc(definition)}</li>")
        parts.append("</ol>")
        if t.examples:
            parts.append("<h4>Examples</h4><ul class='examples'>")
            for example in t.examples:
                parts.append(f"<li>{esc(example)}</li>")
            parts.append("</ul>")
        parts.append("</section>")

    parts.append("</article>")
    return "".join(parts)


def render_word_list(word_list, **params) -> str:
    lang = get_language(word_list.language)
    base = {**params, "lang": word_list.language}
    parts = ["<section class='word-list'>", "<nav class='letters'>"]
    for letter in [lang["all_token"], *lang["letters"]]:
        cls = classes("letter", "active" if letter == word_list.selected_letter else "")
        letter_param = None if letter == lang["all_token"] else letter
        parts.append(f"<a class='{cls}' href='{href('/', **{**base, 'letter': letter_param})}'>"
                     f"{esc(letter)}</a>")
    parts.append("</nav>")

    if word_list.error:
        parts.append(f"<p class='error'>{esc(word_list.error)}</p>")

    parts.append("<div class='grid'>")
    for w in word_list.words:
        translations = ", ".join(t.word for t in w.translations)
        link = href("/", q=w.word, lang=word_list.language)
        parts.append(f"<a class='word-tile' href='{link}'><h3>{esc(w.word)}</h3>"
                     f"<p>{esc(translations)}</p></a>")
    parts.append("</div>")

    letter_param = None if word_list.selected_letter == lang["all_token"] else word_list.selected_letter
    if word_list.loading:
        parts.append("<p class='loading'>Loading...</p>")
    elif word_list.has_more:
        more = href("/", **{**base, "letter": letter_param, "pages": word_list.page + 1})
        parts.append(f"<div class='load-more'><a class='button' href='{more}'>Load More</a></div>")
    elif word_list.words:
        parts.append("<p class='empty'>No more words to load.</p>")

    if not word_list.loading and not word_list.words and not word_list.error:
        parts.append("<p class='empty'>No words found.</p>")

    parts.append("</section>")
    return "".join(parts)


def _select(name: str, options, selected: str, labels=None) -> str:
    parts = [f"<select name='{name}'>"]
    for value in options:
        label = labels[value] if labels else value
        mark = " selected" if value == selected else ""
        parts.append(f"<option value='{esc(value)}'{mark}>{esc(label)}</option>")
    parts.append("</select>")
    return "".join(parts)


def render_add_word_form(form, error: str | None = None, success: str | None = None) -> str:
    parts = []
    if success:
        parts.append(f"<div class='notice success'>{esc(success)}</div>")
    if error:
        parts.append(f"<div class='notice error'>{esc(error)}</div>")

    language_names = {code: lang["name"] for code, lang in LANGUAGES.items()}
    parts += [
        "<form class='add-word' method='post' action='/words/new'>",
        f"<label>Word <input type='text' name='word' value='{esc(form.word)}' required></label>",
        f"<label>Language {_select('language', list(LANGUAGES), form.language, language_names)}</label>",
        f"<label>Type {_select('type', WORD_TYPES, form.type)}</label>",
        f"<label>Difficulty {_select('difficulty', DIFFICULTY_LEVELS, form.difficulty)}</label>",
        f"<label>Translation <input type='text' name='translation_word' "
        f"value='{esc(form.translation_word)}' required></label>",
        f"<label>Definition <textarea name='definition' required>{esc(form.definition)}</textarea></label>",
        "<fieldset class='examples'><legend>Examples</legend>",
    ]
    for i, example in enumerate(form.examples):
        parts.append("<div class='example'>")
        parts.append(f"<input type='text' name='examples' value='{esc(example)}' "
                     f"placeholder='Example {i + 1}'>")
        if len(form.examples) > 1:
            parts.append(f"<button type='submit' name='action' value='remove_example:{i}' "
                         f"formnovalidate>Remove</button>")
        parts.append("</div>")
    parts.append("<button type='submit' name='action' value='add_example' formnovalidate>"
                 "+ Add Example</button>")
    parts.append("</fieldset>")
    parts.append("<button type='submit' name='action' value='submit'>Add Word</button>")
    parts.append("</form>")
    return "".join(parts)


def render_modal(title: str, body: str, close_href: str = "/") -> str:
    return (
        "<div class='modal-backdrop'><div class='modal' role='dialog' aria-modal='true'>"
        f"<header><h2>{esc(title)}</h2>"
        f"<a class='modal-close' href='{esc(close_href)}' aria-label='Close'>&times;</a></header>"
        f"<div class='modal-body'>{body}</div></div></div>"
    )


def render_theme_toggle(theme, next_url: str = "/") -> str:
    if not theme.known:
        return ""
    label = "Light mode" if theme.is_dark else "Dark mode"
    icon = "&#9728;" if theme.is_dark else "&#127769;"
    return (
        "<form class='theme-toggle' method='post' action='/theme/toggle'>"
        f"<input type='hidden' name='next' value='{esc(next_url)}'>"
        f"<button type='submit' aria-label='{label}'>{icon}</button></form>"
    )


def render_pronunciation(word: str, service, playback) -> str:
    if service.error:
        return f"<p class='error pronunciation'>{esc(service.error)}</p>"
    if playback.audio_url:
        return (f"<audio class='pronunciation' src='{esc(playback.audio_url)}' "
                f"autoplay controls></audio>")
    if playback.speech_text:
        return (
            f"<div class='pronunciation' data-speech-text='{esc(playback.speech_text)}' "
            f"data-speech-lang='{esc(playback.speech_locale)}'>"
            "<script>(function(el){if('speechSynthesis' in window){"
            "var u=new SpeechSynthesisUtterance(el.dataset.speechText);"
            "u.lang=el.dataset.speechLang;window.speechSynthesis.speak(u);}"
            "else{el.textContent='Speech synthesis not supported';}})"
            "(document.currentScript.parentElement);</script></div>"
        )
    return f"<p class='pronunciation muted'>No pronunciation available for {esc(word)}</p>"
