"""Fixed replies for bot commands."""

WELCOME_TEXT = """\
🤖 **Welcome to AI Search Engine Bot!**

I'm your intelligent search assistant powered by web search, Google Dorks, and AI analysis.

✨ **What I can do:**
• 🔍 Regular web search
• 🎯 Advanced Google Dork searches for specific results
• 🤖 AI-powered analysis of all search results
• 📊 Show you the top 3 most relevant results
• 💡 Provide insights and summaries for each result

**How to use:**
Just type your search query and I'll automatically detect if it's a Google Dork or regular search!

**Regular Search Examples:**
• "Latest AI developments 2024"
• "Best programming languages for beginners"
• "Climate change solutions"

**Google Dork Examples:**
• `site:github.com machine learning`
• `filetype:pdf cybersecurity`
• "password reset" site:company.com

**Commands:**
• /help - Detailed help
• /dork - Google Dork guide
• /examples - More Dork examples

Ready to search! 🚀"""

HELP_TEXT = """\
🔧 **AI Search Engine Bot Help**

**Commands:**
• /start - Show welcome message
• /help - Show this help message
• /dork - Google Dork operators guide
• /examples - Google Dork search examples

**Search Types:**

🔍 **Regular Search:**
Simply type any search query
• "Machine learning tutorials for beginners"
• "Best restaurants in Tokyo"
• "Latest news about renewable energy"

🎯 **Google Dork Search:**
I automatically detect advanced operators!
• `site:reddit.com programming tips`
• `filetype:pdf "data science"`
• `intitle:"admin panel" inurl:login`

**Features:**
🔍 **Smart Search** - Powered by a web search API
🎯 **Google Dork Support** - Advanced search operators
🤖 **AI Analysis** - Each result gets AI-powered insights
📊 **Top Results** - Shows 3 most relevant results
🌐 **Rich Information** - Titles, snippets, and links
💡 **Context-Aware** - AI understands search context

**Auto-Detection:**
I automatically detect if your query uses Google Dork operators and provide specialized analysis!

Happy searching! 🚀"""

DORK_GUIDE_TEXT = """\
🎯 **Google Dork Operators Guide**

**Site & Domain:**
• `site:example.com` - Search within specific site
• `site:*.edu` - Search all .edu domains
• `-site:example.com` - Exclude specific site

**File Types:**
• `filetype:pdf` - Find PDF files
• `ext:docx` - Find Word documents
• `filetype:xls OR filetype:xlsx` - Excel files

**Content Location:**
• `intitle:"error"` - Find pages with "error" in title
• `inurl:admin` - Pages with "admin" in URL
• `intext:password` - Pages containing "password"
• `inanchor:"click here"` - Links with specific anchor text

**Exact Phrases:**
• `"exact phrase here"` - Search for exact phrase
• `"admin panel" site:company.com` - Combine operators

**Advanced Operators:**
• `allintitle:admin panel login` - All words in title
• `allinurl:admin login` - All words in URL
• `allintext:username password` - All words in content

**Logic & Exclusion:**
• `term1 OR term2` - Either term
• `term1 AND term2` - Both terms
• `-unwanted` - Exclude term
• `+required` - Require term

**Wildcards & Ranges:**
• `* security` - Wildcard matching
• `"admin * panel"` - Wildcard in phrase
• `price $100..$500` - Number ranges

Type /examples for practical examples!"""

DORK_EXAMPLES_TEXT = """\
📚 **Google Dork Examples**

**Security Research:**
• `intitle:"index of" password`
• `filetype:log inurl:"/logs/"`
• `site:pastebin.com "password"`
• `inurl:admin intitle:login`

**File Discovery:**
• `filetype:pdf site:company.com confidential`
• `ext:xlsx "employee" OR "salary"`
• `filetype:doc site:*.gov "classified"`
• `inurl:upload filetype:php`

**Technical Research:**
• `site:stackoverflow.com "machine learning" python`
• `intitle:"swagger" inurl:api`
• `site:*.edu filetype:pdf "research paper"`

**Business Intelligence:**
• `"quarterly report" filetype:pdf site:*.com`
• `intitle:"company presentation" filetype:ppt`

**Academic Research:**
• `filetype:pdf "peer reviewed" machine learning`
• `site:*.edu "research methodology"`

**Combine Multiple Operators:**
• `site:reddit.com OR site:stackoverflow.com "python tips"`
• `intitle:"data breach" -site:wikipedia.org 2024`

Just type any of these examples and I'll execute the search with AI analysis! 🚀"""

COMMAND_TEXTS: dict[str, str] = {
    "/start": WELCOME_TEXT,
    "/help": HELP_TEXT,
    "/dork": DORK_GUIDE_TEXT,
    "/examples": DORK_EXAMPLES_TEXT,
}
