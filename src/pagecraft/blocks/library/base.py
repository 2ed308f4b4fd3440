"""Base stylesheet shared by every generated page."""

BASE_CSS = """
*, *::before, *::after { box-sizing: border-box; margin: 0; padding: 0; }
body { font-family: var(--font-sans, system-ui, sans-serif); background: var(--bg, #F8FAFC); color: var(--text, #0F172A); line-height: 1.6; }
img { display: block; max-width: 100%; }
a { color: var(--primary, #2563EB); text-decoration: none; }
.container { max-width: var(--max-w, 1200px); margin: 0 auto; padding: 0 1.5rem; }
.grid-2 { display: grid; grid-template-columns: repeat(auto-fit, minmax(280px, 1fr)); gap: 1.5rem; }
.grid-3 { display: grid; grid-template-columns: repeat(auto-fit, minmax(240px, 1fr)); gap: 1.5rem; }
.grid-4 { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 1.5rem; }
.flex { display: flex; } .flex-col { flex-direction: column; }
.items-center { align-items: center; } .justify-center { justify-content: center; }
.justify-between { justify-content: space-between; }
.text-center { text-align: center; }
.py-8 { padding-top: 2rem; padding-bottom: 2rem; }
.py-16 { padding-top: 4rem; padding-bottom: 4rem; }
.py-24 { padding-top: 6rem; padding-bottom: 6rem; }
.mb-4 { margin-bottom: 1rem; } .mb-6 { margin-bottom: 1.5rem; } .mb-8 { margin-bottom: 2rem; }
.gap-4 { gap: 1rem; } .gap-6 { gap: 1.5rem; }
.btn { display: inline-flex; align-items: center; gap: .4rem; padding: .6rem 1.4rem; border-radius: var(--radius, 8px); border: 1.5px solid transparent; font-size: .9rem; font-weight: 600; cursor: pointer; transition: all .2s; text-decoration: none; }
.btn-primary { background: var(--primary, #2563EB); color: #fff; border-color: var(--primary, #2563EB); }
.btn-primary:hover { opacity: .88; transform: translateY(-1px); }
.btn-outline { background: transparent; color: var(--primary, #2563EB); border-color: var(--primary, #2563EB); }
.btn-outline:hover { background: var(--primary, #2563EB); color: #fff; }
""".strip()
