import pytest

SPELL_COMPILER_SOURCE = '''local SpellCompiler = {}

local function mergeTables(target, source)
  for k, v in pairs(source) do
    target[k] = v
  end
  return target
end

function SpellCompiler.compileSpell(spellDef, keywordData)
  local compiledSpell = {
    behavior = {},
  }
  for keyword, params in pairs(spellDef.keywords or {}) do
    if type(params) == "boolean" then
      params = {}
    end
    compiledSpell.behavior[keyword] = mergeTables({}, keywordData[keyword])
  end
  compiledSpell.executeAll = function(caster, target, results)
    for _, fn in pairs(compiledSpell.behavior) do
      fn(caster, target, results)
    end
  end
  return compiledSpell
end

function SpellCompiler.debugCompiled(compiledSpell)
  print(compiledSpell)
end

return SpellCompiler
'''

PARTIAL_SOURCE = ('local function mergeTables(target, source)\n'
                  'function SpellCompiler.compileSpell(spellDef, keywordData)\n')


@pytest.fixture
def spell_compiler_source() -> str:
  """Lua source containing every spell-compiler checklist pattern."""
  return SPELL_COMPILER_SOURCE


@pytest.fixture
def partial_source() -> str:
  """Source with only the mergeTables and compileSpell signatures."""
  return PARTIAL_SOURCE


@pytest.fixture
def spell_compiler_file(tmp_path, spell_compiler_source):
  """spellCompiler.lua written into a temporary directory."""
  path = tmp_path / 'spellCompiler.lua'
  path.write_text(spell_compiler_source, encoding='utf-8')
  return path
