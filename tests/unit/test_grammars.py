"""
Unit tests for backtrace grammars and the grammar registry.
"""

import pytest

from crashframe.grammars import (
    DATABASE_GRAMMAR,
    EMBEDDED_VM_GRAMMAR,
    GENERIC_GRAMMAR,
    NATIVE_GRAMMAR,
    TRANSPILED_SCRIPT_GRAMMAR,
    GrammarNotRegisteredError,
    GrammarRegistry,
    create_default_registry,
)
from crashframe.models.frame import FormatPattern


class TestNativeGrammar:
    """Test interpreter frame parsing."""
    
    def test_simple_frame(self):
        assert NATIVE_GRAMMAR.match("./a/b.rb:43:in `foo'") == {
            "file": "./a/b.rb",
            "line": "43",
            "function": "foo",
        }
    
    def test_block_frame(self):
        capture = NATIVE_GRAMMAR.match(
            "./spec/notice_spec.rb:43:in `block (3 levels) in <top (required)>'"
        )
        
        assert capture["file"] == "./spec/notice_spec.rb"
        assert capture["line"] == "43"
        assert capture["function"] == "block (3 levels) in <top (required)>"
    
    def test_single_quoted_function(self):
        capture = NATIVE_GRAMMAR.match("/app/models/user.rb:7:in 'User#save'")
        
        assert capture["file"] == "/app/models/user.rb"
        assert capture["function"] == "User#save"
    
    def test_rejects_embedded_vm_frame(self):
        assert NATIVE_GRAMMAR.match("org.x.Y.z(Y.java:105)") is None


class TestEmbeddedVMGrammar:
    """Test embedded VM frame parsing."""
    
    def test_java_frame(self):
        assert EMBEDDED_VM_GRAMMAR.match("org.x.Y.z(Y.java:105)") == {
            "file": "Y.java",
            "line": "105",
            "function": "org.x.Y.z",
        }
    
    def test_frame_without_line(self):
        capture = EMBEDDED_VM_GRAMMAR.match("java.lang.Thread.run(Thread.java)")
        
        assert capture["function"] == "java.lang.Thread.run"
        assert capture["file"] == "Thread.java"
        assert capture["line"] is None
    
    def test_classloader_uri_file(self):
        capture = EMBEDDED_VM_GRAMMAR.match(
            "org.jruby.RubyKernel.require("
            "uri:classloader:/META-INF/jruby.home/lib/ruby/stdlib/rubygems/core_ext/kernel_require.rb:1)"
        )
        
        assert capture["function"] == "org.jruby.RubyKernel.require"
        assert capture["file"] == (
            "uri:classloader:/META-INF/jruby.home/lib/ruby/stdlib/rubygems/core_ext/kernel_require.rb"
        )
        assert capture["line"] == "1"
    
    def test_escaped_classloader_file(self):
        capture = EMBEDDED_VM_GRAMMAR.match(
            "uri_3a_classloader_3a_.gems.foo.lib.foo.RUBY$method$call$0("
            "uri_3a_classloader_3a_jar:file:/app.jar!/foo.rb:12)"
        )
        
        assert capture["function"] == "uri_3a_classloader_3a_.gems.foo.lib.foo.RUBY$method$call$0"
        assert capture["file"] == "uri_3a_classloader_3a_jar:file:/app.jar!/foo.rb"
        assert capture["line"] == "12"
    
    def test_rejects_long_parenthesized_line(self):
        assert EMBEDDED_VM_GRAMMAR.match("(" * 30000) is None
    
    def test_rejects_native_frame(self):
        assert EMBEDDED_VM_GRAMMAR.match("./a/b.rb:43:in `foo'") is None


class TestGenericGrammar:
    """Test the fallback grammar."""
    
    def test_file_and_line(self):
        assert GENERIC_GRAMMAR.match("/foo/bar/baz.ext:43") == {
            "file": "/foo/bar/baz.ext",
            "line": "43",
            "function": None,
        }
    
    def test_from_prefix(self):
        capture = GENERIC_GRAMMAR.match("from /foo/bar.rb:12")
        
        assert capture["file"] == "/foo/bar.rb"
        assert capture["line"] == "12"
    
    def test_colon_in_function(self):
        capture = GENERIC_GRAMMAR.match("/foo/bar.rb:12:in func")
        
        assert capture["file"] == "/foo/bar.rb"
        assert capture["line"] == "12"
        assert capture["function"] == "func"
    
    def test_backtick_function_keeps_line_in_file(self):
        assert GENERIC_GRAMMAR.match("a.rb:12:in `f'") == {
            "file": "a.rb:12",
            "line": None,
            "function": "f",
        }
    
    def test_missing_line(self):
        capture = GENERIC_GRAMMAR.match("/foo/bar.rb:")
        
        assert capture["file"] == "/foo/bar.rb"
        assert capture["line"] is None
    
    def test_rejects_line_without_colon(self):
        assert GENERIC_GRAMMAR.match("???") is None


class TestDatabaseGrammar:
    """Test PL/SQL frame parsing."""
    
    def test_frame_with_function(self):
        assert DATABASE_GRAMMAR.match('ORA-06512: at "STORE.LI_LICENSES_PACK", line 1945') == {
            "file": None,
            "line": "1945",
            "function": "STORE.LI_LICENSES_PACK",
        }
    
    def test_frame_without_function(self):
        capture = DATABASE_GRAMMAR.match("ORA-06512: at line 1")
        
        assert capture["function"] is None
        assert capture["line"] == "1"
    
    def test_falls_back_to_generic_shape(self):
        capture = DATABASE_GRAMMAR.match("/home/app/oci8.rb:25")
        
        assert capture["file"] == "/home/app/oci8.rb"
        assert capture["line"] == "25"


class TestTranspiledScriptGrammar:
    """Test script runtime frame parsing."""
    
    def test_call_frame(self):
        assert TRANSPILED_SCRIPT_GRAMMAR.match("compile ((execjs):6692:19)") == {
            "file": "(execjs)",
            "line": "6692",
            "function": "compile",
        }
    
    def test_location_frame_has_empty_function(self):
        assert TRANSPILED_SCRIPT_GRAMMAR.match("bootstrap_node.js:467:3") == {
            "file": "bootstrap_node.js",
            "line": "467",
            "function": "",
        }
    
    def test_native_part_of_mixed_trace(self):
        capture = TRANSPILED_SCRIPT_GRAMMAR.match(
            "/opt/rubies/gems/execjs/ruby_racer_runtime.rb:94:in `rescue in wrap_error'"
        )
        
        assert capture["file"] == "/opt/rubies/gems/execjs/ruby_racer_runtime.rb"
        assert capture["line"] == "94"
        assert capture["function"] == "rescue in wrap_error"


class TestGrammarRegistry:
    """Test grammar registration and lookup."""
    
    def test_default_registry_has_every_pattern(self):
        registry = create_default_registry()
        
        assert set(registry.list_patterns()) == set(FormatPattern)
        assert registry.get(FormatPattern.NATIVE) is NATIVE_GRAMMAR
    
    def test_get_unregistered_pattern(self):
        registry = GrammarRegistry()
        
        with pytest.raises(GrammarNotRegisteredError):
            registry.get(FormatPattern.GENERIC)
    
    def test_register_overwrites(self):
        registry = GrammarRegistry([NATIVE_GRAMMAR])
        registry.register(NATIVE_GRAMMAR)
        
        assert registry.list_patterns() == [FormatPattern.NATIVE]
