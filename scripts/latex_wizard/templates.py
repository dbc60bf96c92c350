#!/usr/bin/env python3
"""
Files written into a freshly initialized project.
"""

GITIGNORE_TEMPLATE = r"""
# Build output
out/

# LaTeX byproducts
*.aux
*.bbl
*.bcf
*.blg
*.fdb_latexmk
*.fls
*.glg
*.glo
*.gls
*.glsdefs
*.ist
*.lof
*.log
*.lot
*.out
*.run.xml
*.synctex.gz
*.toc
*.xdy

# Editors
*~
*.swp
.DS_Store
""".lstrip()


MAIN_TEX_TEMPLATE = r"""
\documentclass[11pt]{article}

\usepackage[utf8]{inputenc}
\usepackage[T1]{fontenc}

% Loading the glossaries package (or biblatex, bibtex, natbib) here makes
% `latex-wizard compile` run makeglossaries (or biber) and a second pass.

\title{Title}
\author{Author}

\begin{document}

\maketitle

\end{document}
""".lstrip()
