"""Languages supported by the execution backend, with starter snippets."""

from __future__ import annotations

LANGUAGE_VERSIONS: dict[str, str] = {
    "javascript": "18.15.0",
    "c": "6.3.0",  # MinGW GCC
    "cpp": "6.3.0",  # MinGW G++
    "python": "3.10.0",
    "java": "15.0.2",
    "csharp": "6.12.0",
    "php": "8.2.3",
    "go": "1.22.0",
}

CODE_SNIPPETS: dict[str, str] = {
    "javascript": '\nfunction greet(name) {\n\tconsole.log("Hello, " + name + "!");\n}\n\ngreet("Alex");\n',
    "c": '\n#include <stdio.h>\n\nint main() {\n\tprintf("Hello from C!\\n");\n\treturn 0;\n}\n',
    "cpp": '\n#include <iostream>\nusing namespace std;\n\nint main() {\n\tcout << "Hello from C++!" << endl;\n\treturn 0;\n}\n',
    "go": '\npackage main\n\nimport "fmt"\n\nfunc main() {\n\tfmt.Println("Hello from Go!")\n}\n',
    "python": '\ndef greet(name):\n\tprint("Hello, " + name + "!")\n\ngreet("Alex")\n',
    "java": '\npublic class HelloWorld {\n\tpublic static void main(String[] args) {\n\t\tSystem.out.println("Hello World");\n\t}\n}\n',
    "csharp": (
        "using System;\n\nnamespace HelloWorld\n{\n\tclass Hello { \n"
        "\t\tstatic void Main(string[] args) {\n"
        '\t\t\tConsole.WriteLine("Hello World in C#");\n\t\t}\n\t}\n}\n'
    ),
    "php": "<?php\n\n$name = 'Alex';\necho $name;\n",
}


class UnsupportedLanguageError(KeyError):
    """Raised for a language the backend does not run."""

    def __init__(self, language: str):
        super().__init__(language)
        self.language = language

    def __str__(self) -> str:
        return f"Unsupported language: {self.language!r} (supported: {', '.join(supported_languages())})"


def supported_languages() -> list[str]:
    return list(LANGUAGE_VERSIONS)


def get_version(language: str) -> str:
    try:
        return LANGUAGE_VERSIONS[language]
    except KeyError:
        raise UnsupportedLanguageError(language) from None


def get_snippet(language: str) -> str:
    """Starter code for ``language``. Falls back to empty text for
    languages that run but ship no snippet."""
    get_version(language)
    return CODE_SNIPPETS.get(language, "")
