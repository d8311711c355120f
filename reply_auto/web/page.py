"""
Single-page form served at `/`.

The page is static; it talks to the JSON endpoints in `app.py` and renders
whatever `/api/state` returns.
"""

INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Reply Analyzer</title>
<style>
  body { font-family: system-ui, sans-serif; max-width: 42rem; margin: 2rem auto; padding: 0 1rem; }
  section { border: 1px solid #ddd; border-radius: 8px; padding: 1rem; margin-bottom: 1rem; }
  textarea, select, input[type=text] { width: 100%; box-sizing: border-box; padding: .5rem; }
  textarea { height: 8rem; }
  button { padding: .5rem 1rem; }
  .row { display: flex; gap: .5rem; margin: .5rem 0; align-items: center; justify-content: space-between; }
  .chips { display: flex; flex-wrap: wrap; gap: .5rem; }
  .chip { background: #eee; border-radius: 999px; padding: .2rem .75rem; }
  .chip.blocked { background: #fdd; }
  .chip button { border: none; background: none; cursor: pointer; padding: 0 0 0 .4rem; }
  .alert { padding: .75rem; border-radius: 6px; margin: .5rem 0; }
  .alert.ok { background: #e7f6e7; }
  .alert.bad { background: #fbe4e4; }
</style>
</head>
<body>
<section>
  <h2>Text Analysis</h2>
  <select id="model"></select>
  <p><textarea id="input" placeholder="Enter text to analyze..."></textarea></p>
  <button id="analyze" style="width:100%">Analyze Text</button>
  <div id="error"></div>
  <div id="result"></div>
</section>
<section>
  <h2>Reply Settings</h2>
  <h3>Reply Rules</h3>
  <div class="row"><span>Reply to questions</span><input type="checkbox" id="replyToQuestions"></div>
  <div class="row"><span>Reply to statements</span><input type="checkbox" id="replyToStatements"></div>
  <h3>Priority Keywords</h3>
  <div class="row"><input type="text" id="newKeyword" placeholder="Add keyword"><button id="addKeyword">+</button></div>
  <div class="chips" id="keywords"></div>
  <h3>Blocked Terms</h3>
  <div class="row"><input type="text" id="newBlockedTerm" placeholder="Add blocked term"><button id="addBlockedTerm">+</button></div>
  <div class="chips" id="blockedTerms"></div>
</section>
<script>
const $ = (id) => document.getElementById(id);
let busy = false;

async function call(method, url, body) {
  const resp = await fetch(url, {
    method,
    headers: { "Content-Type": "application/json" },
    body: body === undefined ? undefined : JSON.stringify(body),
  });
  const data = await resp.json();
  if (data && data.settings) render(data);
  else if (data && data.detail) $("error").innerHTML = alertBox(data.detail, false);
  return data;
}

function alertBox(text, ok) {
  const div = document.createElement("div");
  div.className = "alert " + (ok ? "ok" : "bad");
  div.textContent = text;
  return div.outerHTML;
}

function chips(target, terms, path, cls) {
  const el = $(target);
  el.innerHTML = "";
  terms.forEach((term, index) => {
    const chip = document.createElement("span");
    chip.className = "chip " + cls;
    chip.textContent = term;
    const remove = document.createElement("button");
    remove.textContent = "x";
    remove.onclick = () => call("DELETE", path + "/" + index);
    chip.appendChild(remove);
    el.appendChild(chip);
  });
}

function render(state) {
  const s = state.settings;
  const select = $("model");
  select.innerHTML = "";
  state.models.forEach((m) => select.add(new Option(m.label, m.id, false, m.id === s.model)));
  $("replyToQuestions").checked = s.replyToQuestions;
  $("replyToStatements").checked = s.replyToStatements;
  chips("keywords", s.keywords, "/api/settings/keywords", "");
  chips("blockedTerms", s.blockedTerms, "/api/settings/blocked-terms", "blocked");
  $("error").innerHTML = state.error ? alertBox(state.error, false) : "";
  const result = $("result");
  result.innerHTML = "";
  if (state.result) {
    const [head, ...rest] = state.summary;
    result.innerHTML = alertBox(head, state.result.shouldReply);
    const list = document.createElement("ul");
    rest.forEach((line) => { const li = document.createElement("li"); li.textContent = line; list.appendChild(li); });
    result.appendChild(list);
  }
}

function addTerm(inputId, path) {
  const input = $(inputId);
  call("POST", path, { term: input.value }).then(() => { input.value = ""; });
}

$("analyze").onclick = async () => {
  if (busy) return;
  busy = true;
  $("analyze").disabled = true;
  $("analyze").textContent = "Analyzing...";
  try {
    await call("POST", "/api/analyze", { text: $("input").value });
  } finally {
    busy = false;
    $("analyze").disabled = false;
    $("analyze").textContent = "Analyze Text";
  }
};
$("model").onchange = (e) => call("PUT", "/api/settings/model", { model: e.target.value });
$("replyToQuestions").onchange = () => call("POST", "/api/settings/toggle", { setting: "replyToQuestions" });
$("replyToStatements").onchange = () => call("POST", "/api/settings/toggle", { setting: "replyToStatements" });
$("addKeyword").onclick = () => addTerm("newKeyword", "/api/settings/keywords");
$("addBlockedTerm").onclick = () => addTerm("newBlockedTerm", "/api/settings/blocked-terms");
$("newKeyword").onkeydown = (e) => { if (e.key === "Enter") addTerm("newKeyword", "/api/settings/keywords"); };
$("newBlockedTerm").onkeydown = (e) => { if (e.key === "Enter") addTerm("newBlockedTerm", "/api/settings/blocked-terms"); };

call("GET", "/api/state");
</script>
</body>
</html>
"""
