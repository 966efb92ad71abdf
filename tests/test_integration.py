from codeblocker import IndentedBuilder, Scope, SemicolonScope


def test_class_with_methods() -> None:
    with IndentedBuilder.create() as builder:
        builder.write_line("public class TestClass")
        with Scope(builder):
            builder.write_line("public void Method1()")
            with Scope(builder):
                builder.write_line('Console.WriteLine("Hello");')
            builder.blank_line()
            builder.write_line("public void Method2()")
            with Scope(builder):
                builder.write_line("return;")

    expected = (
        "public class TestClass\r\n"
        "{\r\n"
        "\tpublic void Method1()\r\n"
        "\t{\r\n"
        '\t\tConsole.WriteLine("Hello");\r\n'
        "\t}\r\n"
        "\r\n"
        "\tpublic void Method2()\r\n"
        "\t{\r\n"
        "\t\treturn;\r\n"
        "\t}\r\n"
        "}\r\n"
    )
    assert builder.render() == expected


def test_mixed_scope_kinds() -> None:
    builder = IndentedBuilder.create()
    builder.write_line("namespace Test")
    with Scope(builder):
        builder.write_line("public class Example")
        with Scope(builder):
            builder.write_line("public enum Color")
            with SemicolonScope(builder):
                builder.write_line("Red,")
                builder.write_line("Green,")
                builder.write_line("Blue")

    expected = (
        "namespace Test\r\n"
        "{\r\n"
        "\tpublic class Example\r\n"
        "\t{\r\n"
        "\t\tpublic enum Color\r\n"
        "\t\t{\r\n"
        "\t\t\tRed,\r\n"
        "\t\t\tGreen,\r\n"
        "\t\t\tBlue\r\n"
        "\t\t};\r\n"
        "\t}\r\n"
        "}\r\n"
    )
    assert builder.render() == expected


def test_deep_nesting_balances_braces() -> None:
    builder = IndentedBuilder.create()
    scopes = []
    for level in range(10):
        builder.write_line(f"level{level}")
        scopes.append(Scope(builder))
    builder.write_line("deepest")
    for scope in reversed(scopes):
        scope.close()

    result = builder.render()
    assert "\t" * 10 + "deepest\r\n" in result
    assert result.count("{") == result.count("}") == 10
    assert builder.depth == 0


def test_empty_scope_between_lines() -> None:
    builder = IndentedBuilder.create()
    builder.write_line("before")
    with SemicolonScope(builder):
        pass
    builder.write_line("after")
    assert builder.render() == "before\r\n{\r\n};\r\nafter\r\n"


def test_json_like_block_with_two_spaces() -> None:
    builder = IndentedBuilder.create("  ", newline="\n")
    builder.write('"config": ')
    with builder.block():
        builder.write_line('"name": "demo",')
        builder.write('"tags": ')
        with builder.block():
            builder.write_line('"a"')
    assert builder.render() == (
        '"config": {\n'
        '  "name": "demo",\n'
        '  "tags": {\n'
        '    "a"\n'
        "  }\n"
        "}\n"
    )
