# app/ui.py
"""Single-page picker UI served on every path except the API."""

from fastapi.responses import HTMLResponse


SECURITY_HEADERS = {
    "Content-Security-Policy": "; ".join(
        [
            "default-src 'self'",
            "script-src 'self' 'unsafe-inline'",
            "style-src 'unsafe-inline' 'self'",
            "connect-src 'self' https://www.goodreads.com",
            "img-src 'self' data:",
            "navigate-to 'self' https://www.goodreads.com",
            "base-uri 'none'",
            "form-action 'none'",
            "frame-ancestors 'none'",
        ]
    ),
    "Referrer-Policy": "no-referrer",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Permissions-Policy": "geolocation=(), camera=(), microphone=()",
}


INDEX_HTML = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Goodreads Random Book Picker</title>
<style>
  :root { color-scheme: light dark; }
  body { font-family: system-ui, sans-serif; margin: 0; background: #f7f7f7; color: #111; }
  main { max-width: 720px; margin: 0 auto; padding: 24px; }
  section { background: #fff; border-radius: 16px; padding: 20px; display: grid; gap: 12px; }
  h1 { font-size: 22px; margin: 0; text-align: center; }
  .row { display: flex; gap: 12px; }
  input, button { font-size: 15px; padding: 10px 12px; border-radius: 10px; border: 1px solid #ddd; }
  input { flex: 1; }
  button { background: #111; color: #fff; border: none; cursor: pointer; }
  small { color: #666; }
  #book { border: 1px solid #eee; border-radius: 14px; padding: 14px; display: none; gap: 6px; }
</style>
</head>
<body>
<main>
  <section>
    <h1>Goodreads Random Book Picker</h1>
    <label for="userId">Your numeric Goodreads user id</label>
    <div class="row">
      <input id="userId" placeholder="e.g. 137464693">
      <button id="load">Load and pick</button>
    </div>
    <small id="status"></small>
    <label for="filter">Filter</label>
    <input id="filter" placeholder="Filter by title or author">
    <div class="row"><button id="pick">Pick for me</button></div>
    <div id="book">
      <strong id="btitle"></strong>
      <span id="bauthor"></span>
      <a id="blink" href="#" target="_blank" rel="noopener noreferrer">Open on Goodreads</a>
    </div>
  </section>
</main>
<script>
  const $ = (id) => document.getElementById(id);
  let books = [];

  function pool() {
    const q = $("filter").value.trim().toLowerCase();
    return q ? books.filter(b => (b.title + " " + b.author).toLowerCase().includes(q)) : books;
  }

  $("pick").onclick = () => {
    const candidates = pool();
    if (!candidates.length) return;
    const b = candidates[Math.floor(Math.random() * candidates.length)];
    $("btitle").textContent = b.title;
    $("bauthor").textContent = b.author || "";
    $("blink").href = b.link;
    $("book").style.display = "grid";
  };

  $("load").onclick = async () => {
    const userId = $("userId").value.trim();
    if (!userId) { $("status").textContent = "Enter your Goodreads numeric user id"; return; }
    $("status").textContent = "Loading shelf";
    $("book").style.display = "none";
    try {
      const res = await fetch("/goodreads-shelf?user_id=" + encodeURIComponent(userId) +
                              "&shelf=to-read&per_page=200", { cache: "no-store" });
      if (!res.ok) throw new Error("status " + res.status);
      books = (await res.json()).books || [];
      $("status").textContent = books.length ? "Loaded " + books.length + " books" : "No books found";
      if (books.length) $("pick").click();
    } catch (e) {
      $("status").textContent = "Could not load shelf";
    }
  };

  window.addEventListener("load", () => $("userId").focus());
</script>
</body>
</html>
"""


def index_page() -> HTMLResponse:
    return HTMLResponse(content=INDEX_HTML, headers=SECURITY_HEADERS)
