EMPTY = ""

NOT_A_DIFF = """\
Just some release notes,
nothing that looks like a patch.
"""

MODIFIED_PYTHON = """\
diff --git a/src/app.py b/src/app.py
index 83db48f..bf269f4 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,4 +1,5 @@
 import os
-import sys
+import logging
+print("debug")
 import json
 import re
@@ -10,3 +11,4 @@ def main():
     try:
         run()
+    except:
         pass
"""

CONSOLE_LOG_TYPESCRIPT = """\
diff --git a/web/index.ts b/web/index.ts
index 1111111..2222222 100644
--- a/web/index.ts
+++ b/web/index.ts
@@ -1,2 +1,3 @@
 const a = 1;
+console.log("x");
 export default a;
"""

EVAL_JAVASCRIPT_NEW_FILE = """\
diff --git a/web/run.js b/web/run.js
new file mode 100644
index 0000000..3333333
--- /dev/null
+++ b/web/run.js
@@ -0,0 +1,2 @@
+const userInput = read();
+eval(userInput);
"""

RENAMED_RUBY = """\
diff --git a/lib/old_name.rb b/lib/new_name.rb
similarity index 90%
rename from lib/old_name.rb
rename to lib/new_name.rb
index 4444444..5555555 100644
--- a/lib/old_name.rb
+++ b/lib/new_name.rb
@@ -1,3 +1,3 @@
 class Foo
-  def bar; end
+  def baz; end
 end
"""

PURE_RENAME = """\
diff --git a/docs/a.md b/docs/b.md
similarity index 100%
rename from docs/a.md
rename to docs/b.md
"""

DELETED_GO = """\
diff --git a/cmd/old.go b/cmd/old.go
deleted file mode 100644
index 6666666..0000000
--- a/cmd/old.go
+++ /dev/null
@@ -1,2 +0,0 @@
-package main
-func main() {}
"""

BINARY_PNG = """\
diff --git a/assets/logo.png b/assets/logo.png
index 7777777..8888888 100644
Binary files a/assets/logo.png and b/assets/logo.png differ
"""

# produced by a plain `diff -u`, no git headers
PLAIN_UNIFIED = """\
--- config.c\t2024-01-01 10:00:00.000000000 +0000
+++ config.c\t2024-01-02 10:00:00.000000000 +0000
@@ -1,3 +1,3 @@
 int a = 1;
--- not a header
+++ not a header either
 int c = 3;
"""

NO_NEWLINE_AT_EOF = """\
diff --git a/notes.txt b/notes.txt
index 9999999..aaaaaaa 100644
--- a/notes.txt
+++ b/notes.txt
@@ -1 +1 @@
-old
\\ No newline at end of file
+new
\\ No newline at end of file
"""

FORMAT_PATCH = """\
From 1234567890abcdef Mon Sep 17 00:00:00 2001
From: Dev <dev@example.com>
Subject: [PATCH] Tweak logging

---
 src/log.py | 2 +-
 1 file changed, 1 insertion(+), 1 deletion(-)

diff --git a/src/log.py b/src/log.py
index bbbbbbb..ccccccc 100644
--- a/src/log.py
+++ b/src/log.py
@@ -1,2 +1,2 @@
-LEVEL = "DEBUG"
+LEVEL = "INFO"
 NAME = "app"
--
2.39.0
"""

TRUNCATED_HUNK_HEADER = """\
diff --git a/src/app.py b/src/app.py
index 83db48f..bf269f4 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,4 +1
+import logging
"""

SHORT_HUNK = """\
diff --git a/src/a.py b/src/a.py
index 1111111..2222222 100644
--- a/src/a.py
+++ b/src/a.py
@@ -1,3 +1,4 @@
 import os
+import sys
diff --git a/src/b.py b/src/b.py
index 3333333..4444444 100644
--- a/src/b.py
+++ b/src/b.py
@@ -1 +1 @@
-x = 1
+x = 2
"""

HUNK_WITHOUT_FILE = """\
@@ -1 +1 @@
-x = 1
+x = 2
"""

TARGET_WITHOUT_SOURCE = """\
+++ b/src/a.py
@@ -1 +1 @@
-x = 1
+x = 2
"""


# header declares one line on each side, the last added line is extra
LONG_HUNK = """\
--- a/x.py
+++ b/x.py
@@ -1,1 +1,1 @@
-a
+b
+garbage
"""

def added_lines_diff(path: str, count: int) -> str:
    """New file diff adding `count` lines to `path`"""

    lines = [
        f"diff --git a/{path} b/{path}",
        "new file mode 100644",
        "index 0000000..1234567",
        "--- /dev/null",
        f"+++ b/{path}",
        f"@@ -0,0 +1,{count} @@",
    ]
    lines.extend(f"+line {idx}" for idx in range(1, count + 1))
    return "\n".join(lines) + "\n"


MULTI_FILE = (
    MODIFIED_PYTHON
    + CONSOLE_LOG_TYPESCRIPT
    + EVAL_JAVASCRIPT_NEW_FILE
    + RENAMED_RUBY
    + DELETED_GO
    + BINARY_PNG
)
