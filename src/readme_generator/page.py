INDEX_HTML = """\
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>README Generator</title>
  <style>
    body { font-family: sans-serif; max-width: 48rem; margin: 2rem auto; }
    input { width: 70%; } textarea { width: 100%; height: 28rem; }
    .error { color: #b00020; }
  </style>
</head>
<body>
  <h1>README Generator</h1>
  <form id="form">
    <input id="repoUrl" type="url" placeholder="https://github.com/owner/repo" required>
    <button type="submit">Generate</button>
  </form>
  <p id="status"></p>
  <textarea id="readme" readonly></textarea>
  <script>
    document.getElementById("form").addEventListener("submit", async (event) => {
      event.preventDefault();
      const status = document.getElementById("status");
      const output = document.getElementById("readme");
      status.className = "";
      status.textContent = "Analyzing repository & generating README...";
      output.value = "";
      const resp = await fetch("/api/generate-readme", {
        method: "POST",
        headers: {"Content-Type": "application/json"},
        body: JSON.stringify({repoUrl: document.getElementById("repoUrl").value}),
      });
      const data = await resp.json().catch(() => ({error: `HTTP error ${resp.status}`}));
      if (resp.ok) {
        status.textContent = "README generated.";
        output.value = data.readme;
      } else {
        status.className = "error";
        status.textContent = data.error || `HTTP error ${resp.status}`;
      }
    });
  </script>
</body>
</html>
"""
