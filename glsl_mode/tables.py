# --                                                            ; {{{1
#
# File        : glsl_mode/tables.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2022-03-12
#
# Copyright   : Copyright (C) 2022  Felix C. Stegerman
# Version     : v0.1.0
# License     : GPLv3+
#
# --                                                            ; }}}1

                                                                # {{{1
r"""
Reference category tables: GLSL 4.60, GLSL ES 3.20 and the
GL_KHR_vulkan_glsl additions.

Words may appear in more than one category (e.g. attribute is a
qualifier, deprecated, and reserved in GLSL ES); the classifier
resolves that by precedence.  Within a category, words are unique.

>>> t = category_table()
>>> "vec4" in t[Category.TYPE].words
True
>>> "attribute" in t[Category.DEPRECATED_KEYWORD].words
True
>>> "attribute" in t[Category.RESERVED_KEYWORD].words
True
>>> sorted( c.value for c, e in t.items() if e.template )
['extension', 'preprocessor', 'variable']
>>> all( len(set(ws)) == len(ws) for ws in WORDS.values() )
True
>>> all( M.isident(w) for ws in WORDS.values() for w in ws )
True
"""                                                             # }}}1

import sys

from collections import namedtuple

from . import misc as M
from .data import Category

class TableEntry(namedtuple("TableEntry", "words template".split())):
  """
  Words of a category + optional structural template.

  A template is a regex; if it contains {words} that is replaced by
  the (optimised) word alternation, otherwise the template is an
  alternative to the words.  A named group m delimits the span; the
  whole match is used when there is none.
  """

  def merge(self, words):
    """
    >>> e = TableEntry(frozenset(["a"]), None).merge(["b", "a"])
    >>> sorted(e.words)
    ['a', 'b']
    """
    return self._replace(words = self.words | frozenset(words))

# === Word lists ===

TYPES = """
  void bool int uint float double
  vec2 vec3 vec4 dvec2 dvec3 dvec4 bvec2 bvec3 bvec4
  ivec2 ivec3 ivec4 uvec2 uvec3 uvec4
  mat2 mat3 mat4 mat2x2 mat2x3 mat2x4 mat3x2 mat3x3 mat3x4
  mat4x2 mat4x3 mat4x4
  dmat2 dmat3 dmat4 dmat2x2 dmat2x3 dmat2x4 dmat3x2 dmat3x3 dmat3x4
  dmat4x2 dmat4x3 dmat4x4
  atomic_uint

  sampler1D sampler2D sampler3D samplerCube sampler2DRect
  sampler1DShadow sampler2DShadow sampler2DRectShadow
  samplerCubeShadow sampler1DArray sampler2DArray
  sampler1DArrayShadow sampler2DArrayShadow samplerBuffer
  sampler2DMS sampler2DMSArray samplerCubeArray
  samplerCubeArrayShadow samplerExternalOES
  isampler1D isampler2D isampler3D isamplerCube isampler2DRect
  isampler1DArray isampler2DArray isamplerBuffer isampler2DMS
  isampler2DMSArray isamplerCubeArray
  usampler1D usampler2D usampler3D usamplerCube usampler2DRect
  usampler1DArray usampler2DArray usamplerBuffer usampler2DMS
  usampler2DMSArray usamplerCubeArray

  image1D image2D image3D image2DRect imageCube imageBuffer
  image1DArray image2DArray imageCubeArray image2DMS image2DMSArray
  iimage1D iimage2D iimage3D iimage2DRect iimageCube iimageBuffer
  iimage1DArray iimage2DArray iimageCubeArray iimage2DMS
  iimage2DMSArray
  uimage1D uimage2D uimage3D uimage2DRect uimageCube uimageBuffer
  uimage1DArray uimage2DArray uimageCubeArray uimage2DMS
  uimage2DMSArray

  texture2DRect texture1DArray texture2DArray textureBuffer
  texture2DMS texture2DMSArray textureCubeArray
  itexture1D itexture2D itexture3D itextureCube itexture2DRect
  itexture1DArray itexture2DArray itextureBuffer itexture2DMS
  itexture2DMSArray itextureCubeArray
  utexture1D utexture2D utexture3D utextureCube utexture2DRect
  utexture1DArray utexture2DArray utextureBuffer utexture2DMS
  utexture2DMSArray utextureCubeArray
  sampler samplerShadow
  subpassInput subpassInputMS isubpassInput isubpassInputMS
  usubpassInput usubpassInputMS
  accelerationStructureEXT rayQueryEXT
""".split()

QUALIFIERS = """
  const in out inout uniform buffer shared attribute varying
  centroid flat smooth noperspective patch sample
  invariant precise layout
  lowp mediump highp
  coherent volatile restrict readonly writeonly
  rayPayloadEXT rayPayloadInEXT hitAttributeEXT callableDataEXT
  callableDataInEXT shaderRecordEXT perprimitiveEXT
  taskPayloadSharedEXT
""".split()

KEYWORDS = """
  break continue do for while switch case default if else
  subroutine discard return struct precision true false
  terminateInvocation terminateRayEXT ignoreIntersectionEXT
""".split()

DEPRECATED_KEYWORDS = """
  attribute varying
""".split()

RESERVED_KEYWORDS = """
  common partition active asm class union enum typedef template
  this resource goto inline noinline public static extern external
  interface long short half fixed unsigned superp input output
  hvec2 hvec3 hvec4 fvec2 fvec3 fvec4 sampler3DRect filter sizeof
  cast namespace using
  attribute varying
""".split()

PREPROCESSOR_DIRECTIVES = """
  define undef if ifdef ifndef else elif endif error pragma
  extension version line include
""".split()

PREPROCESSOR_BUILTINS = """
  __LINE__ __FILE__ __VERSION__ defined
  GL_ES GL_SPIRV VULKAN
  GL_core_profile GL_compatibility_profile GL_es_profile
""".split()

BUILTINS = """
  radians degrees sin cos tan asin acos atan sinh cosh tanh asinh
  acosh atanh

  pow exp log exp2 log2 sqrt inversesqrt

  abs sign floor trunc round roundEven ceil fract mod modf min max
  clamp mix step smoothstep isnan isinf floatBitsToInt
  floatBitsToUint intBitsToFloat uintBitsToFloat fma frexp ldexp

  packUnorm2x16 packSnorm2x16 packUnorm4x8 packSnorm4x8
  unpackUnorm2x16 unpackSnorm2x16 unpackUnorm4x8 unpackSnorm4x8
  packHalf2x16 unpackHalf2x16 packDouble2x32 unpackDouble2x32

  length distance dot cross normalize faceforward reflect refract

  matrixCompMult outerProduct transpose determinant inverse

  lessThan lessThanEqual greaterThan greaterThanEqual equal notEqual
  any all not

  uaddCarry usubBorrow umulExtended imulExtended bitfieldExtract
  bitfieldInsert bitfieldReverse bitCount findLSB findMSB

  textureSize textureQueryLod textureQueryLevels textureSamples
  texture textureProj textureLod textureOffset texelFetch
  texelFetchOffset textureProjOffset textureLodOffset textureProjLod
  textureProjLodOffset textureGrad textureGradOffset textureProjGrad
  textureProjGradOffset textureGather textureGatherOffset
  textureGatherOffsets

  atomicCounterIncrement atomicCounterDecrement atomicCounter
  atomicCounterAdd atomicCounterSubtract atomicCounterMin
  atomicCounterMax atomicCounterAnd atomicCounterOr atomicCounterXor
  atomicCounterExchange atomicCounterCompSwap
  atomicAdd atomicMin atomicMax atomicAnd atomicOr atomicXor
  atomicExchange atomicCompSwap

  imageSize imageSamples imageLoad imageStore imageAtomicAdd
  imageAtomicMin imageAtomicMax imageAtomicAnd imageAtomicOr
  imageAtomicXor imageAtomicExchange imageAtomicCompSwap

  EmitStreamVertex EndStreamPrimitive EmitVertex EndPrimitive

  dFdx dFdy dFdxFine dFdyFine dFdxCoarse dFdyCoarse fwidth
  fwidthFine fwidthCoarse

  interpolateAtCentroid interpolateAtSample interpolateAtOffset

  barrier memoryBarrier memoryBarrierAtomicCounter
  memoryBarrierBuffer memoryBarrierShared memoryBarrierImage
  groupMemoryBarrier

  subpassLoad
  anyInvocation allInvocations allInvocationsEqual

  traceRayEXT reportIntersectionEXT executeCallableEXT
  SetMeshOutputsEXT EmitMeshTasksEXT
""".split()

DEPRECATED_BUILTINS = """
  texture1D texture1DProj texture1DLod texture1DProjLod
  texture2D texture2DProj texture2DLod texture2DProjLod
  texture3D texture3DProj texture3DLod texture3DProjLod
  textureCube textureCubeLod
  shadow1D shadow1DProj shadow1DLod shadow1DProjLod
  shadow2D shadow2DProj shadow2DLod shadow2DProjLod
  texture2DLodEXT texture2DProjLodEXT textureCubeLodEXT
  texture2DGradEXT texture2DProjGradEXT textureCubeGradEXT
  ftransform noise1 noise2 noise3 noise4
""".split()

VARIABLES = """
  gl_NumWorkGroups gl_WorkGroupSize gl_WorkGroupID
  gl_LocalInvocationID gl_GlobalInvocationID gl_LocalInvocationIndex

  gl_VertexID gl_InstanceID gl_VertexIndex gl_InstanceIndex
  gl_DrawID gl_BaseVertex gl_BaseInstance gl_ViewIndex
  gl_PerVertex gl_Position gl_PointSize gl_ClipDistance
  gl_CullDistance gl_in gl_out

  gl_PrimitiveIDIn gl_InvocationID gl_PrimitiveID gl_Layer
  gl_ViewportIndex gl_PatchVerticesIn gl_TessLevelOuter
  gl_TessLevelInner gl_TessCoord

  gl_FragCoord gl_FrontFacing gl_PointCoord gl_SampleID
  gl_SamplePosition gl_SampleMaskIn gl_SampleMask
  gl_HelperInvocation gl_FragDepth gl_NumSamples
  gl_DepthRange gl_DepthRangeParameters

  gl_MaxVertexAttribs gl_MaxVertexUniformVectors
  gl_MaxVertexUniformComponents gl_MaxVertexOutputComponents
  gl_MaxVertexTextureImageUnits gl_MaxFragmentInputComponents
  gl_MaxFragmentUniformVectors gl_MaxFragmentUniformComponents
  gl_MaxCombinedTextureImageUnits gl_MaxTextureImageUnits
  gl_MaxDrawBuffers gl_MaxClipDistances gl_MaxCullDistances
  gl_MaxCombinedClipAndCullDistances gl_MaxSamples
  gl_MaxComputeWorkGroupCount gl_MaxComputeWorkGroupSize
  gl_MaxComputeUniformComponents gl_MaxComputeTextureImageUnits
  gl_MaxComputeImageUniforms gl_MaxComputeAtomicCounters
  gl_MaxComputeAtomicCounterBuffers
  gl_MaxGeometryInputComponents gl_MaxGeometryOutputComponents
  gl_MaxGeometryOutputVertices gl_MaxGeometryTotalOutputComponents
  gl_MaxTessControlInputComponents gl_MaxTessGenLevel
  gl_MaxPatchVertices gl_MaxViewports gl_MinProgramTexelOffset
  gl_MaxProgramTexelOffset gl_MaxImageUnits gl_MaxImageSamples
  gl_MaxAtomicCounterBindings gl_MaxTransformFeedbackBuffers
  gl_MaxTransformFeedbackInterleavedComponents
  gl_MaxInputAttachments
""".split()

DEPRECATED_VARIABLES = """
  gl_FragColor gl_FragData gl_ClipVertex gl_Color gl_SecondaryColor
  gl_FrontColor gl_BackColor gl_FrontSecondaryColor
  gl_BackSecondaryColor gl_TexCoord gl_FogCoord gl_FogFragCoord
  gl_Normal gl_Vertex
  gl_MultiTexCoord0 gl_MultiTexCoord1 gl_MultiTexCoord2
  gl_MultiTexCoord3 gl_MultiTexCoord4 gl_MultiTexCoord5
  gl_MultiTexCoord6 gl_MultiTexCoord7

  gl_ModelViewMatrix gl_ProjectionMatrix gl_ModelViewProjectionMatrix
  gl_TextureMatrix gl_NormalMatrix gl_ModelViewMatrixInverse
  gl_ProjectionMatrixInverse gl_ModelViewProjectionMatrixInverse
  gl_TextureMatrixInverse gl_ModelViewMatrixTranspose
  gl_ProjectionMatrixTranspose gl_ModelViewProjectionMatrixTranspose
  gl_TextureMatrixTranspose gl_ModelViewMatrixInverseTranspose
  gl_ProjectionMatrixInverseTranspose
  gl_ModelViewProjectionMatrixInverseTranspose
  gl_TextureMatrixInverseTranspose gl_NormalScale

  gl_ClipPlane gl_Point gl_FrontMaterial gl_BackMaterial
  gl_LightSource gl_LightModel gl_FrontLightModelProduct
  gl_BackLightModelProduct gl_FrontLightProduct gl_BackLightProduct
  gl_TextureEnvColor gl_EyePlaneS gl_EyePlaneT gl_EyePlaneR
  gl_EyePlaneQ gl_ObjectPlaneS gl_ObjectPlaneT gl_ObjectPlaneR
  gl_ObjectPlaneQ gl_Fog

  gl_MaxLights gl_MaxClipPlanes gl_MaxTextureUnits
  gl_MaxTextureCoords gl_MaxVaryingFloats gl_MaxVaryingComponents
  gl_MaxVaryingVectors
""".split()

WORDS = {
  Category.PREPROCESSOR         : PREPROCESSOR_DIRECTIVES,
  Category.TYPE                 : TYPES,
  Category.DEPRECATED_KEYWORD   : DEPRECATED_KEYWORDS,
  Category.RESERVED_KEYWORD     : RESERVED_KEYWORDS,
  Category.QUALIFIER            : QUALIFIERS,
  Category.KEYWORD              : KEYWORDS,
  Category.PREPROCESSOR_BUILTIN : PREPROCESSOR_BUILTINS,
  Category.DEPRECATED_BUILTIN   : DEPRECATED_BUILTINS,
  Category.BUILTIN              : BUILTINS,
  Category.DEPRECATED_VARIABLE  : DEPRECATED_VARIABLES,
  Category.VARIABLE             : VARIABLES,
  Category.EXTENSION            : [],
}

# === Structural templates ===

TEMPLATES = {
  Category.PREPROCESSOR : M.RX_PREPROC_HEAD + "(?P<m>" +
                          M.RX_PREPROC_HASH + "{words})" +
                          M.RX_WORD_END,
  Category.VARIABLE     : M.RX_WORD_START + M.RX_GL_VARIABLE +
                          M.RX_WORD_END,
  Category.EXTENSION    : M.RX_WORD_START + M.RX_GL_EXTENSION +
                          M.RX_WORD_END,
}

def category_table():
  """Fresh reference table: Category -> TableEntry."""
  return { c: TableEntry(frozenset(WORDS[c]), TEMPLATES.get(c))
           for c in Category }

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
